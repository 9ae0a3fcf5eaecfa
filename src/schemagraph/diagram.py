"""Diagram model emission.

Runs the full pipeline: ingest -> infer relationships -> build graph ->
layout -> emit. Each call is a pure transformation of its input; nothing is
cached and the input tables are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from schemagraph.core.settings import DiagramSettings
from schemagraph.core.types import DiagramModel, RelationshipCandidate
from schemagraph.graph.builder import build_edges, build_nodes
from schemagraph.graph.layout import get_layout
from schemagraph.inference.naming import infer_relationships
from schemagraph.schema.ingest import TableInput, ingest_tables

logger = logging.getLogger(__name__)


class SchemaDiagramEngine:
    """Turns a schema snapshot into an entity-relationship diagram.

    The engine holds settings only, so one instance can be shared freely.

    Example:
        engine = SchemaDiagramEngine()
        model = engine.build([
            {"name": "users", "columns": [{"name": "id", "isPrimary": True}]},
            {"name": "posts", "columns": [{"name": "id"}, {"name": "user_id"}]},
        ])
        model.edges[0].id  # "posts-users"
    """

    def __init__(self, settings: DiagramSettings | None = None) -> None:
        self.settings = settings or DiagramSettings()

    def relationships(self, tables: Iterable[TableInput]) -> list[RelationshipCandidate]:
        """Validate ``tables`` and return the inferred relationship candidates."""
        return infer_relationships(ingest_tables(tables))

    def build(self, tables: Iterable[TableInput]) -> DiagramModel:
        """Build the diagram model for ``tables``.

        Raises:
            ValidationError: If any table lacks a name or a column collection
        """
        validated = ingest_tables(tables)
        if not validated:
            return DiagramModel(nodes=(), edges=(), is_empty=True)

        candidates = infer_relationships(validated)
        positions = get_layout(self.settings).positions(validated, candidates)
        nodes = build_nodes(validated, positions)
        edges = build_edges(
            candidates,
            [n.id for n in nodes],
            deduplicate=self.settings.deduplicate_edges,
            include_self_references=self.settings.include_self_references,
        )

        logger.debug(
            f"Built diagram: {len(nodes)} nodes, {len(edges)} edges "
            f"({len(candidates)} inferred, layout={self.settings.layout})"
        )
        return DiagramModel(nodes=tuple(nodes), edges=tuple(edges), is_empty=False)

    __call__ = build


def build_diagram(
    tables: Iterable[TableInput], settings: DiagramSettings | None = None
) -> DiagramModel:
    """Build the diagram model for ``tables`` with the given (or default) settings."""
    return SchemaDiagramEngine(settings).build(tables)
