"""Naming-convention relationship inference.

A column named ``<base>_id`` is assumed to reference the ``id`` column of a
table named ``<base>s`` or ``<base>``, whichever appears first in the table
list. Only column names are inspected; types and declared constraints are
never consulted.

Example:
    users(id), posts(id, user_id)  ->  posts.user_id -> users.id
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from schemagraph.core.types import (
    ASSUMED_TARGET_COLUMN,
    Column,
    RelationshipCandidate,
    Table,
)

logger = logging.getLogger(__name__)

FOREIGN_KEY_SUFFIX = "_id"
PLURAL_SUFFIX = "s"


def strip_foreign_key_suffix(column_name: str) -> str | None:
    """Return the name without its trailing ``_id``, or None if it has none.

    ``"user_id"`` -> ``"user"``; ``"uuid"`` and ``"valid"`` -> None.
    """
    if not column_name.endswith(FOREIGN_KEY_SUFFIX):
        return None
    return column_name[: -len(FOREIGN_KEY_SUFFIX)]


def candidate_target_names(base: str) -> tuple[str, str]:
    """Return the (naively pluralized, as-is) table names for a base."""
    return base + PLURAL_SUFFIX, base


def find_target_table(tables: Sequence[Table], candidates: Sequence[str]) -> Table | None:
    """Return the first table, in input order, named like any candidate."""
    return next((t for t in tables if t.name in candidates), None)


def infer_column_relationship(
    table: Table, column: Column, tables: Sequence[Table]
) -> RelationshipCandidate | None:
    """Infer the relationship implied by a single column, if any."""
    base = strip_foreign_key_suffix(column.name)
    if base is None:
        return None

    target = find_target_table(tables, candidate_target_names(base))
    if target is None:
        return None

    return RelationshipCandidate(
        source_table=table.name,
        source_column=column.name,
        target_table=target.name,
        target_column=ASSUMED_TARGET_COLUMN,
    )


def iter_relationships(tables: Sequence[Table]) -> Iterator[RelationshipCandidate]:
    """Yield relationship candidates table by table, column by column."""
    for table in tables:
        for column in table.columns:
            candidate = infer_column_relationship(table, column, tables)
            if candidate is not None:
                logger.debug(
                    f"Inferred {candidate.source_table}.{candidate.source_column} -> "
                    f"{candidate.target_table}.{candidate.target_column}"
                )
                yield candidate


def infer_relationships(tables: Sequence[Table]) -> list[RelationshipCandidate]:
    """Infer every naming-convention relationship in the table list.

    Self-references (``comments.comments_id`` -> ``comments``) are kept, and
    several columns resolving to the same table each produce a candidate.

    Args:
        tables: Validated tables in input order

    Returns:
        Candidates in table order, then column order
    """
    return list(iter_relationships(tables))
