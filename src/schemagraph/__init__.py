"""SchemaGraph - Entity-relationship diagrams from schema snapshots.

Infers foreign-key relationships from column naming conventions
(``posts.user_id`` -> ``users.id``), builds the node/edge graph and lays it
out deterministically. No database constraints are consulted and no I/O is
performed: the input is a list of tables, the output an immutable model.

Example:
    from schemagraph import build_diagram

    model = build_diagram([
        {"name": "users", "columns": [{"name": "id", "type": "int", "isPrimary": True}]},
        {"name": "posts", "columns": [{"name": "id"}, {"name": "user_id"}]},
    ])

    model.is_empty           # False
    model.node_ids()         # ["users", "posts"]
    model.edges[0].target    # "users"
    payload = model.to_dict()  # camelCase JSON for the renderer
"""

from schemagraph.core.settings import DiagramSettings
from schemagraph.core.types import (
    Column,
    DiagramEdge,
    DiagramModel,
    DiagramNode,
    LayoutAlgorithm,
    Position,
    RelationshipCandidate,
    Table,
)
from schemagraph.diagram import SchemaDiagramEngine, build_diagram
from schemagraph.exceptions import SchemaFileError, SchemaGraphError, ValidationError
from schemagraph.export import to_flow, to_mermaid
from schemagraph.inference import infer_relationships
from schemagraph.schema import ingest_tables, tables_from_metadata

__version__ = "0.1.0"

__all__ = [
    # Engine
    "SchemaDiagramEngine",
    "build_diagram",
    "DiagramSettings",
    # Pipeline steps
    "ingest_tables",
    "infer_relationships",
    "tables_from_metadata",
    # Types
    "Column",
    "Table",
    "RelationshipCandidate",
    "Position",
    "DiagramNode",
    "DiagramEdge",
    "DiagramModel",
    "LayoutAlgorithm",
    # Exporters
    "to_mermaid",
    "to_flow",
    # Exceptions
    "SchemaGraphError",
    "ValidationError",
    "SchemaFileError",
]
