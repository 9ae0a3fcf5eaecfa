"""Core components for SchemaGraph."""

from schemagraph.core.settings import DiagramSettings
from schemagraph.core.types import (
    ASSUMED_TARGET_COLUMN,
    Column,
    DiagramEdge,
    DiagramModel,
    DiagramNode,
    LayoutAlgorithm,
    Position,
    RelationshipCandidate,
    Table,
)

__all__ = [
    "ASSUMED_TARGET_COLUMN",
    "Column",
    "Table",
    "RelationshipCandidate",
    "Position",
    "DiagramNode",
    "DiagramEdge",
    "DiagramModel",
    "LayoutAlgorithm",
    "DiagramSettings",
]
