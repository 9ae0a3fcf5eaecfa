"""Mermaid ``erDiagram`` export.

Produces plain text that Mermaid renders as an ER diagram. Coordinates are
dropped; Mermaid does its own layout.

Mermaid only accepts word-like entity and attribute names, so other
characters are replaced with ``_``. An entity whose name changed keeps the
original as its display alias (``order_items["order items"]``); two names
that clean up to the same identifier are drawn as one entity.
"""

from __future__ import annotations

import re

from schemagraph.core.types import DiagramModel

UNKNOWN_TYPE = "unknown"

_TYPE_UNSAFE = re.compile(r"[^A-Za-z0-9_]+")
_NAME_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def mermaid_type(type_label: str) -> str:
    """Make a free-form column type usable as a Mermaid attribute type.

    ``"character varying(255)"`` -> ``"character_varying_255"``
    """
    cleaned = _TYPE_UNSAFE.sub("_", type_label.strip()).strip("_")
    if not cleaned:
        return UNKNOWN_TYPE
    return f"_{cleaned}" if cleaned[0].isdigit() else cleaned


def mermaid_identifier(name: str) -> str:
    """Make a table or column name usable as a Mermaid identifier.

    ``"system.views"`` -> ``"system_views"``; ``"1st"`` -> ``"_1st"``
    """
    cleaned = _NAME_UNSAFE.sub("_", name)
    if not cleaned or not _IDENTIFIER.match(cleaned[0]):
        cleaned = f"_{cleaned}"
    return cleaned


def _quoted(text: str) -> str:
    return '"' + text.replace('"', "'") + '"'


def _entity(name: str) -> str:
    identifier = mermaid_identifier(name)
    return identifier if identifier == name else f"{identifier}[{_quoted(name)}]"


def _label(name: str) -> str:
    return name if _IDENTIFIER.fullmatch(name) else _quoted(name)


def to_mermaid(model: DiagramModel) -> str:
    """Render ``model`` as a Mermaid ER diagram.

    Entities follow node order and relationships follow edge order, so the
    text is as deterministic as the model. Columns that start an edge are
    tagged ``FK``; primary key columns are tagged ``PK``.
    """
    fk_columns = {(e.source, e.source_column) for e in model.edges}

    lines = ["erDiagram"]
    for node in model.nodes:
        lines.append(f"  {_entity(node.id)} {{")
        for col in node.payload.columns:
            keys = []
            if col.is_primary:
                keys.append("PK")
            if (node.id, col.name) in fk_columns:
                keys.append("FK")
            key_text = f" {','.join(keys)}" if keys else ""
            lines.append(f"    {mermaid_type(col.type)} {mermaid_identifier(col.name)}{key_text}")
        lines.append("  }")

    for edge in model.edges:
        lines.append(
            f"  {mermaid_identifier(edge.target)} ||--o{{ "
            f"{mermaid_identifier(edge.source)} : {_label(edge.source_column)}"
        )

    return "\n".join(lines)
