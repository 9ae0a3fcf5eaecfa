"""Core types for SchemaGraph.

Every type is an immutable pydantic model. Field names are snake_case in
Python; the camelCase keys used by the admin tool's schema API
(``isPrimary``, ``sourceHandle``, ``isEmpty``, ...) are accepted on input and
produced by ``to_dict()``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, SerializationInfo, field_serializer

# Column every inferred relationship is assumed to point at
ASSUMED_TARGET_COLUMN = "id"

_FROZEN = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

# Introspection snapshots keep keys this package does not model (indexes,
# foreignKeys, size, ...) so payloads reach the renderer as they were sent.
_SNAPSHOT = {"frozen": True, "populate_by_name": True, "extra": "allow"}


class LayoutAlgorithm(StrEnum):
    """Available node placement strategies."""

    GRID = "grid"  # Fixed index-based grid (default)
    LAYERED = "layered"  # Columns by relationship depth

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid layout names."""
        return [a.value for a in cls]


class Column(BaseModel):
    """A named attribute of a table, as reported by schema introspection."""

    name: str
    type: str = ""
    is_primary: bool = Field(default=False, alias="isPrimary")
    nullable: bool = True
    default_value: str | None = Field(default=None, alias="defaultValue")

    model_config = _SNAPSHOT


class Table(BaseModel):
    """A named relation with an ordered list of columns."""

    name: str
    columns: tuple[Column, ...]
    row_count: int | None = Field(default=None, alias="rowCount")

    model_config = _SNAPSHOT

    def column_names(self) -> list[str]:
        """Return column names in declaration order."""
        return [c.name for c in self.columns]

    def to_payload(self, mode: str = "json") -> dict[str, Any]:
        """Return the table with the keys it was given, in the API's camelCase.

        Fields left at their defaults are omitted, unmodeled keys are kept.
        """
        return self.model_dump(mode=mode, by_alias=True, exclude_unset=True)


class RelationshipCandidate(BaseModel):
    """A foreign-key link guessed from a column name."""

    source_table: str
    source_column: str
    target_table: str
    target_column: str = ASSUMED_TARGET_COLUMN

    model_config = _FROZEN

    @property
    def is_self_reference(self) -> bool:
        return self.source_table == self.target_table


class Position(BaseModel):
    """2-D canvas coordinates of a node's top-left corner."""

    x: int
    y: int

    model_config = _FROZEN


class DiagramNode(BaseModel):
    """One table placed on the diagram."""

    id: str
    position: Position
    payload: Table
    type: str = "table"

    model_config = _FROZEN

    @field_serializer("payload")
    def serialize_payload(self, payload: Table, info: SerializationInfo) -> dict[str, Any]:
        return payload.to_payload(mode=info.mode)


class DiagramEdge(BaseModel):
    """One inferred relationship drawn between two nodes."""

    id: str
    source: str
    target: str
    source_handle: str = Field(alias="sourceHandle")
    target_handle: str = Field(alias="targetHandle")
    source_column: str = Field(alias="sourceColumn")
    target_column: str = Field(default=ASSUMED_TARGET_COLUMN, alias="targetColumn")

    model_config = _FROZEN


class DiagramModel(BaseModel):
    """Nodes, edges and an emptiness flag, ready for a renderer."""

    nodes: tuple[DiagramNode, ...] = ()
    edges: tuple[DiagramEdge, ...] = ()
    is_empty: bool = Field(alias="isEmpty")

    model_config = _FROZEN

    def node_ids(self) -> list[str]:
        """Return node ids in layout order."""
        return [n.id for n in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Return the model as JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
