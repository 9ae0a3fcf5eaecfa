"""Graph construction and layout for SchemaGraph."""

from schemagraph.graph.builder import build_edge, build_edges, build_nodes
from schemagraph.graph.layout import (
    GridLayout,
    LayeredLayout,
    Layout,
    get_layout,
    grid_position,
    relationship_levels,
)

__all__ = [
    "build_nodes",
    "build_edge",
    "build_edges",
    "Layout",
    "GridLayout",
    "LayeredLayout",
    "get_layout",
    "grid_position",
    "relationship_levels",
]
