"""Build table snapshots from SQLAlchemy metadata.

Works on a ``MetaData`` that has already been declared or reflected; no
connection is opened here. Declared foreign keys are deliberately ignored:
relationships are inferred from column names only.
"""

from __future__ import annotations

import logging

from sqlalchemy import MetaData
from sqlalchemy import Table as SATable
from sqlalchemy.exc import CompileError
from sqlalchemy.schema import Column as SAColumn

from schemagraph.core.types import Column, Table

logger = logging.getLogger(__name__)


def _type_label(column: SAColumn) -> str:
    try:
        return str(column.type)
    except CompileError:
        # Dialect-specific types without a generic rendering
        return type(column.type).__name__.upper()


def _default_label(column: SAColumn) -> str | None:
    default = column.server_default
    if default is None:
        return None
    arg = getattr(default, "arg", None)
    return None if arg is None else str(arg)


def column_from_sqlalchemy(column: SAColumn) -> Column:
    """Convert a SQLAlchemy column to a Column snapshot."""
    return Column(
        name=column.name,
        type=_type_label(column),
        is_primary=bool(column.primary_key),
        nullable=bool(column.nullable),
        default_value=_default_label(column),
    )


def table_from_sqlalchemy(table: SATable) -> Table:
    """Convert a SQLAlchemy table to a Table snapshot, keeping column order."""
    return Table(name=table.name, columns=tuple(column_from_sqlalchemy(c) for c in table.columns))


def tables_from_metadata(metadata: MetaData) -> list[Table]:
    """Convert every table in ``metadata`` in declaration order."""
    tables = [table_from_sqlalchemy(t) for t in metadata.tables.values()]
    logger.debug(f"Converted {len(tables)} SQLAlchemy tables")
    return tables
