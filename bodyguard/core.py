"""
The recursive schema matcher.

`validate` dispatches on the kind of the schema (never on the shape of the
value), descends structurally, and raises a ValidationError at the first
mismatch. The input value and the schema are never mutated; containers in the
result are always new.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from .context import get_max_depth
from .errors import ValidationError, value_type
from .types import (
    UNDEFINED,
    UNDEFINED_SCHEMA,
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
    is_optional,
    to_schema,
)

logger = logging.getLogger(__name__)


def validate(value: Any, schema: Any, path: Path = ("body",)) -> Any:
    """
    Validate a value of unknown shape against a schema.

    Args:
        value: The value to check (e.g. a decoded request body)
        schema: Schema model node or native schema form
        path: Starting path used in error reports

    Returns:
        The narrowed value. Lists and dicts are rebuilt; dicts only contain
        fields declared in the schema.

    Raises:
        ValidationError: if the value does not match the schema
        SchemaError: if the schema is not a recognized shape, or nesting
            exceeds the configured max_depth
        Exception: anything raised by a custom validator, unchanged

    Usage:
        body = validate(request_json, {
            "name": str,
            "role": either("user", "admin"),
            "age": safe_integer,
            "coordinates": [float, float],
        })
    """
    return _validate(value, schema, tuple(path), get_max_depth())


def _validate(value: Any, schema: Any, path: Path, max_depth: int) -> Any:
    if len(path) > max_depth:
        logger.debug("Depth limit %d reached at %s", max_depth, path[:8])
        raise SchemaError(f"schema nesting exceeds max_depth ({max_depth})")

    node = to_schema(schema)

    match node:
        case Undefined():
            if value is not UNDEFINED:
                raise ValidationError(path, schema, value)
            return value

        case Null():
            if value is not None:
                raise ValidationError(path, schema, value)
            return value

        case Literal(value=literal):
            if not _literal_matches(value, literal):
                raise ValidationError(path, schema, value)
            return value

        case TypeTag(kind=kind):
            if value_type(value) != kind:
                raise ValidationError(path, schema, value)
            return value

        case ArrayOf(element=element):
            if not isinstance(value, (list, tuple)):
                raise ValidationError(path, schema, value)
            return [
                _validate(item, element, (*path, i), max_depth)
                for i, item in enumerate(value)
            ]

        case Tuple(elements=elements):
            if not isinstance(value, (list, tuple)) or len(value) != len(elements):
                raise ValidationError(path, schema, value)
            return [
                _validate(item, element, (*path, i), max_depth)
                for i, (item, element) in enumerate(zip(value, elements))
            ]

        case Record(fields=fields):
            if not isinstance(value, Mapping):
                raise ValidationError(path, schema, value)
            return _validate_record(value, fields, path, max_depth)

        case Custom(fn=fn):
            return fn(value, path)

    raise SchemaError("invalid schema")


def _validate_record(
    value: Mapping[Any, Any], fields: Mapping[str, Any], path: Path, max_depth: int
) -> dict[Any, Any]:
    """
    Every declared field must be present unless its schema is explicitly
    optional (`UNDEFINED`, or `either(UNDEFINED, ...)`). Keys not declared in
    `fields` are checked against UNDEFINED and therefore rejected.
    """
    for key, field in fields.items():
        if key not in value and not is_optional(field):
            raise ValidationError((*path, key), field, UNDEFINED)

    result = {
        key: _validate(item, fields.get(key, UNDEFINED_SCHEMA), (*path, key), max_depth)
        for key, item in value.items()
    }

    return {key: item for key, item in result.items() if item is not UNDEFINED}


def _literal_matches(value: Any, literal: str | int | float | bool) -> bool:
    """Strict equality: kinds must agree, and a NaN literal matches NaN."""
    if isinstance(literal, bool):
        return isinstance(value, bool) and value == literal
    if isinstance(literal, str):
        return isinstance(value, str) and value == literal
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(literal, float) and math.isnan(literal):
        return isinstance(value, float) and math.isnan(value)
    return value == literal
