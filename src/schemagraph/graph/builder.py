"""Graph construction: tables become nodes, relationship candidates become edges."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from schemagraph.core.types import (
    DiagramEdge,
    DiagramNode,
    Position,
    RelationshipCandidate,
    Table,
)

logger = logging.getLogger(__name__)

# Handle suffixes: outgoing links leave a column on the right side of its
# table, incoming links arrive on the left side.
SOURCE_HANDLE_SIDE = "right"
TARGET_HANDLE_SIDE = "left"


def source_handle(column_name: str) -> str:
    return f"{column_name}-{SOURCE_HANDLE_SIDE}"


def target_handle(column_name: str) -> str:
    return f"{column_name}-{TARGET_HANDLE_SIDE}"


def edge_id(source: str, target: str) -> str:
    return f"{source}-{target}"


def build_nodes(tables: Sequence[Table], positions: Sequence[Position]) -> list[DiagramNode]:
    """Create one node per table, in input order.

    Raises:
        ValueError: If the number of positions differs from the number of tables
    """
    if len(tables) != len(positions):
        raise ValueError(f"Got {len(positions)} positions for {len(tables)} tables")
    return [
        DiagramNode(id=table.name, position=position, payload=table)
        for table, position in zip(tables, positions)
    ]


def build_edge(candidate: RelationshipCandidate) -> DiagramEdge:
    """Create the edge drawn for one relationship candidate."""
    return DiagramEdge(
        id=edge_id(candidate.source_table, candidate.target_table),
        source=candidate.source_table,
        target=candidate.target_table,
        source_handle=source_handle(candidate.source_column),
        target_handle=target_handle(candidate.target_column),
        source_column=candidate.source_column,
        target_column=candidate.target_column,
    )


def build_edges(
    candidates: Sequence[RelationshipCandidate],
    node_ids: Collection[str],
    *,
    deduplicate: bool = False,
    include_self_references: bool = True,
) -> list[DiagramEdge]:
    """Create one edge per candidate, in candidate order.

    By default every candidate yields its own edge, so two columns pointing
    at the same table produce two edges with the same id. Edges whose
    endpoints are not node ids are never emitted.

    Args:
        candidates: Inferred relationships
        node_ids: Ids of the nodes the edges may connect
        deduplicate: Keep only the first edge per (source, target) pair
        include_self_references: Keep edges from a table to itself
    """
    known = set(node_ids)
    seen: set[tuple[str, str]] = set()
    edges: list[DiagramEdge] = []

    for candidate in candidates:
        pair = (candidate.source_table, candidate.target_table)
        if candidate.source_table not in known or candidate.target_table not in known:
            logger.debug(f"Dropping edge with unknown endpoint: {pair[0]} -> {pair[1]}")
            continue
        if candidate.is_self_reference and not include_self_references:
            continue
        if deduplicate:
            if pair in seen:
                continue
            seen.add(pair)
        edges.append(build_edge(candidate))

    return edges
