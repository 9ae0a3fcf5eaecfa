"""Input parsing utilities for CLI commands."""

import json
from pathlib import Path
from typing import Any

from schemagraph.exceptions import SchemaFileError


def read_schema_file(path: str) -> list[Any]:
    """Read a schema snapshot from a JSON file.

    Accepted shapes:
        [{"name": "users", "columns": [...]}, ...]
        {"tables": [{"name": "users", "columns": [...]}, ...]}

    The second form is what the admin tool's schema endpoint returns.
    Entries are returned as-is; validating them is the engine's job.

    Args:
        path: Path to JSON file

    Returns:
        Table entries in file order

    Raises:
        SchemaFileError: If the file is missing, not JSON, or has another shape
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SchemaFileError(path, "file not found")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaFileError(path, f"invalid JSON on line {e.lineno}: {e.msg}") from e

    if isinstance(data, dict) and "tables" in data:
        data = data["tables"]
    if not isinstance(data, list):
        raise SchemaFileError(path, "expected a list of tables or an object with a 'tables' key")
    return data
