"""Custom exceptions for SchemaGraph.

Errors carry a human-readable message plus a JSON-serializable context so
callers (and the CLI's ``--json`` mode) can report exactly which input was
rejected.
"""

from __future__ import annotations

from typing import Any


class SchemaGraphError(Exception):
    """Base exception for all SchemaGraph errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ValidationError(SchemaGraphError):
    """Input table metadata is structurally malformed."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        table_name: str | None = None,
        field_errors: dict[str, str] | None = None,
    ) -> None:
        context: dict[str, Any] = {"field_errors": field_errors or {}}
        if index is not None:
            context["index"] = index
        if table_name is not None:
            context["table_name"] = table_name
        super().__init__(message, context)
        self.index = index
        self.table_name = table_name
        self.field_errors = field_errors or {}


class SchemaFileError(SchemaGraphError):
    """Schema snapshot file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        message = f"Cannot read schema file '{path}': {reason}"
        super().__init__(message, {"path": path, "reason": reason})
        self.path = path
        self.reason = reason
