"""Schema snapshot ingestion for SchemaGraph."""

from schemagraph.schema.ingest import ingest_table, ingest_tables
from schemagraph.schema.reflection import tables_from_metadata

__all__ = [
    "ingest_table",
    "ingest_tables",
    "tables_from_metadata",
]
