"""Diagram exporters for SchemaGraph."""

from schemagraph.export.flow import to_flow
from schemagraph.export.mermaid import to_mermaid

__all__ = [
    "to_flow",
    "to_mermaid",
]
