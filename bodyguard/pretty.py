"""
Display-safe rendering of paths and schemas.

Output of these functions is meant for end users: it never contains anything
from the validated value, only field names, indices and schema literals.
"""

from __future__ import annotations

import math
from typing import Any

from .types import (
    ArrayOf,
    Custom,
    Literal,
    Null,
    Path,
    Record,
    SchemaError,
    Tuple,
    TypeTag,
    Undefined,
    to_schema,
)


def pretty_path(path: Path) -> str:
    """
    Format a field path for display.

    Examples:
        pretty_path(("body", "items", 2, "name"))  # "body.items[2].name"
        pretty_path((0, "id"))                     # "[0].id"
    """
    parts = []
    for i, segment in enumerate(path):
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f"[{segment}]")
        elif i == 0:
            parts.append(f"{segment}")
        else:
            parts.append(f".{segment}")
    return "".join(parts)


def format_number(value: int | float) -> str:
    """Render a number the way it reads in JSON-ish output (NaN, Infinity, 2 not 2.0)."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def pretty_schema(schema: Any, indent_increment: int = 2, indent: int = 0) -> str:
    """
    Format a schema for display.

    Args:
        schema: Schema model node or native schema form
        indent_increment: Spaces added per nesting level of records
        indent: Base number of spaces used after a newline

    Unrecognized schemas render as "unknown" rather than raising.
    """
    try:
        node = to_schema(schema)
    except SchemaError:
        return "unknown"

    match node:
        case Undefined():
            return "undefined"
        case Null():
            return "null"
        case Literal(value=bool() as value):
            return "true" if value else "false"
        case Literal(value=str() as value):
            return f'"{value}"'
        case Literal(value=value):
            return format_number(value)
        case TypeTag(kind=kind):
            return kind
        case ArrayOf(element=element):
            return f"{pretty_schema(element, indent_increment, indent)}[]"
        case Tuple(elements=elements):
            inner = ", ".join(
                pretty_schema(e, indent_increment, indent) for e in elements
            )
            return f"[{inner}]"
        case Record(fields=fields):
            if not fields:
                return "{}"
            pad = " " * (indent + indent_increment)
            lines = [
                f"{pad}{name}: {pretty_schema(field, indent_increment, indent + indent_increment)},\n"
                for name, field in fields.items()
            ]
            return "{\n" + "".join(lines) + " " * indent + "}"
        case Custom(metadata=None):
            return "custom_validator"
        case Custom(metadata=metadata):
            if metadata.schemas is None:
                return metadata.name
            inner = metadata.separator.join(
                pretty_schema(s, indent_increment, indent) for s in metadata.schemas
            )
            return f"{metadata.name}({inner})"

    return "unknown"
