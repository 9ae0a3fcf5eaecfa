"""Diagram settings.

Defaults reproduce the admin tool's diagram exactly: a 3-column grid with
300px column and 400px row spacing, one edge per inferred relationship and
self-references kept.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import BaseModel, Field

from schemagraph.core.types import LayoutAlgorithm
from schemagraph.exceptions import ValidationError

ENV_PREFIX = "SCHEMAGRAPH_"

# Environment variable suffix -> settings field
_ENV_FIELDS = {
    "LAYOUT": "layout",
    "GRID_COLUMNS": "grid_columns",
    "COLUMN_SPACING": "column_spacing",
    "ROW_SPACING": "row_spacing",
}


class DiagramSettings(BaseModel):
    """Configuration for diagram construction."""

    layout: LayoutAlgorithm = Field(default=LayoutAlgorithm.GRID)
    grid_columns: int = Field(default=3, ge=1, description="Nodes per grid row")
    column_spacing: int = Field(default=300, ge=0, description="Horizontal distance in px")
    row_spacing: int = Field(default=400, ge=0, description="Vertical distance in px")
    deduplicate_edges: bool = Field(
        default=False, description="Keep only the first edge per (source, target) pair"
    )
    include_self_references: bool = Field(
        default=True, description="Keep edges whose source and target are the same table"
    )

    model_config = {"frozen": True}

    @classmethod
    def build(cls, **values: Any) -> DiagramSettings:
        """Create settings, raising SchemaGraph's ValidationError on bad values."""
        try:
            return cls(**values)
        except pydantic.ValidationError as e:
            field_errors = {
                ".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()
            }
            raise ValidationError("Invalid diagram settings", field_errors=field_errors) from e

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> DiagramSettings:
        """Load settings from SCHEMAGRAPH_* environment variables.

        Priority:
        1. Explicit keyword overrides (ignored when None)
        2. SCHEMAGRAPH_* environment variables
        3. Defaults
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for suffix, field_name in _ENV_FIELDS.items():
            if raw := env.get(f"{ENV_PREFIX}{suffix}"):
                values[field_name] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**values)
