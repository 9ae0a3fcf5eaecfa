"""Shared test fixtures for SchemaGraph."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from schemagraph import Column, Table


def _make_table(name: str, *column_names: str) -> Table:
    return Table(
        name=name,
        columns=tuple(Column(name=c, type="int", is_primary=(c == "id")) for c in column_names),
    )


@pytest.fixture
def make_table() -> Callable[..., Table]:
    """Factory for tables of int columns; a column named 'id' is the primary key."""
    return _make_table


@pytest.fixture
def blog_tables() -> list[Table]:
    """users <- posts <- comments, plus an unrelated tags table."""
    return [
        _make_table("users", "id", "email"),
        _make_table("posts", "id", "user_id", "title"),
        _make_table("comments", "id", "post_id", "user_id", "body"),
        _make_table("tags", "id", "label"),
    ]


@pytest.fixture
def api_schema() -> list[dict[str, Any]]:
    """Schema in the shape returned by the admin tool's schema endpoint."""
    return [
        {
            "name": "users",
            "columns": [
                {"name": "id", "type": "integer", "nullable": False, "isPrimary": True},
                {"name": "email", "type": "character varying(255)", "nullable": False, "isPrimary": False},
            ],
            "indexes": [{"name": "users_pkey", "columns": ["id"], "unique": True}],
            "rowCount": 2,
        },
        {
            "name": "posts",
            "columns": [
                {"name": "id", "type": "integer", "nullable": False, "isPrimary": True},
                {"name": "user_id", "type": "integer", "nullable": True, "isPrimary": False},
            ],
            "indexes": [],
        },
    ]


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any], str]:
    """Write a value to a JSON file and return its path."""

    def _write(data: Any, name: str = "schema.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
