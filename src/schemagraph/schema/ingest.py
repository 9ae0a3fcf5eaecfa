"""Schema ingestion: validate the incoming ordered table list."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pydantic

from schemagraph.core.types import Table
from schemagraph.exceptions import ValidationError

TableInput = Table | Mapping[str, Any]


def _check_structure(index: int, name: Any, columns: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ValidationError(
            f"Table at index {index} has no name. Every table needs a non-empty name.",
            index=index,
            field_errors={"name": "missing or empty"},
        )
    if columns is None:
        raise ValidationError(
            f"Table '{name}' at index {index} has no column collection. "
            "Pass an empty list for tables without columns.",
            index=index,
            table_name=name,
            field_errors={"columns": "missing"},
        )


def ingest_table(index: int, item: TableInput) -> Table:
    """Validate one table entry, coercing API-shaped mappings into a Table.

    Args:
        index: Position of the entry in the input sequence (for error context)
        item: Table instance or mapping with ``name`` and ``columns`` keys

    Returns:
        The Table (the same object when a Table was passed)

    Raises:
        ValidationError: If the entry is structurally malformed
    """
    if isinstance(item, Table):
        _check_structure(index, item.name, getattr(item, "columns", None))
        return item

    if not isinstance(item, Mapping):
        raise ValidationError(
            f"Table at index {index} must be a Table or a mapping, "
            f"got {type(item).__name__}.",
            index=index,
        )

    name = item.get("name")
    _check_structure(index, name, item.get("columns"))
    try:
        return Table.model_validate(item)
    except pydantic.ValidationError as e:
        field_errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ValidationError(
            f"Table '{name}' at index {index} is malformed: {e.error_count()} invalid field(s).",
            index=index,
            table_name=name,
            field_errors=field_errors,
        ) from e


def ingest_tables(tables: Iterable[TableInput]) -> list[Table]:
    """Validate an ordered sequence of tables.

    Order and contents pass through unchanged; the input is never mutated.
    Processing stops at the first malformed entry.

    Raises:
        ValidationError: If any table lacks a name or a column collection
    """
    return [ingest_table(index, item) for index, item in enumerate(tables)]
