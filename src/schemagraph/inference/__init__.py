"""Relationship inference for SchemaGraph."""

from schemagraph.inference.naming import (
    FOREIGN_KEY_SUFFIX,
    candidate_target_names,
    find_target_table,
    infer_relationships,
    strip_foreign_key_suffix,
)

__all__ = [
    "FOREIGN_KEY_SUFFIX",
    "candidate_target_names",
    "find_target_table",
    "infer_relationships",
    "strip_foreign_key_suffix",
]
