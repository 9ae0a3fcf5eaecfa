"""Export for React-Flow-style canvases.

Nodes carry their table under ``data.table`` and are rendered by the
canvas's ``table`` node type; edges are drawn animated in a faint blue.
"""

from __future__ import annotations

from typing import Any

from schemagraph.core.types import DiagramEdge, DiagramModel, DiagramNode

EDGE_STYLE: dict[str, Any] = {"stroke": "#3b82f6", "strokeWidth": 1.5, "opacity": 0.4}


def flow_node(node: DiagramNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "type": node.type,
        "position": node.position.model_dump(),
        "data": {"table": node.payload.to_payload()},
    }


def flow_edge(edge: DiagramEdge, animated: bool = True) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "sourceHandle": edge.source_handle,
        "targetHandle": edge.target_handle,
        "animated": animated,
        "style": dict(EDGE_STYLE),
    }


def to_flow(model: DiagramModel, animated: bool = True) -> dict[str, Any]:
    """Return ``{"nodes": [...], "edges": [...]}`` ready to hand to the canvas."""
    return {
        "nodes": [flow_node(n) for n in model.nodes],
        "edges": [flow_edge(e, animated=animated) for e in model.edges],
    }
