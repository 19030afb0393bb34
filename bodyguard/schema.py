"""
Pydantic interop for bodyguard schemas.

Provides to_type_hint() and to_pydantic() functions.
"""

from __future__ import annotations

import typing
from typing import Annotated, Any

from pydantic import PlainValidator, create_model

from .core import validate
from .types import (
    UNDEFINED,
    ArrayOf,
    Custom,
    Literal,
    Null,
    Record,
    Tuple,
    TypeTag,
    Undefined,
    is_optional,
    to_schema,
)

_TAG_HINTS: dict[str, Any] = {
    "string": str,
    "number": int | float,
    "boolean": bool,
}


def to_type_hint(schema: Any) -> Any:
    """
    Python annotation for the value `validate` returns for `schema`.

    Usage:
        to_type_hint([str])                 # list[str]
        to_type_hint(("a", 1))              # tuple[Literal["a"], Literal[1]]
        to_type_hint({"name": str})         # dict[str, Any]
    """
    match to_schema(schema):
        case TypeTag(kind=kind):
            return _TAG_HINTS[kind]
        case Literal(value=float() as value) if value != value:
            return float
        case Literal(value=value):
            return typing.Literal[value]
        case Null():
            return None
        case Undefined():
            return Any
        case ArrayOf(element=element):
            return list[to_type_hint(element)]  # type: ignore[misc]
        case Tuple(elements=elements):
            return tuple[tuple(to_type_hint(e) for e in elements)]  # type: ignore[misc]
        case Record():
            return dict[str, Any]
        case Custom():
            return Any

    return Any


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile a record schema to a Pydantic model.

    Each field keeps bodyguard semantics: it is checked by `validate` at path
    `(name, field)`, and a mismatch surfaces as a pydantic ValidationError
    carrying the bodyguard message. Fields marked optional (`UNDEFINED`, or an
    `either` containing it) default to UNDEFINED; field schemas are inspected
    but never run while the model is built.

    Args:
        name: Name of the generated model class
        schema: Record schema (dict or Record)

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": str,
            "role": either("user", "admin"),
            "nickname": either(UNDEFINED, str),
        })
        user = User(name="Alice", role="admin")
    """
    node = to_schema(schema)
    if not isinstance(node, Record):
        raise TypeError("Schema must be a dict")

    fields: dict[str, Any] = {}

    for key, field_schema in node.fields.items():
        hint = Annotated[
            to_type_hint(field_schema),
            PlainValidator(_field_validator(field_schema, (name, key))),
        ]
        if is_optional(field_schema):
            fields[key] = (hint, UNDEFINED)
        else:
            fields[key] = (hint, ...)

    return create_model(name, **fields)


def _field_validator(field_schema: Any, path: tuple[str, str]) -> Any:
    def check(value: Any) -> Any:
        return validate(value, field_schema, path)

    return check

