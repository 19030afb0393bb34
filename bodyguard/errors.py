"""
Error types for bodyguard.

ValidationError is raised on the first mismatch found. Its message and
derived fields are safe to show to end users: the only thing taken from the
offending value is a coarse kind (see `value_type`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .pretty import pretty_path, pretty_schema
from .types import UNDEFINED, Path, SchemaError

__all__ = ["ValidationError", "SchemaError", "value_type"]


def value_type(value: Any) -> str:
    """
    Classify a value into a display-safe kind without inspecting its contents.

    Returns one of: "undefined", "null", "boolean", "number", "string",
    "array", "object", "unknown".
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "unknown"
    return "object"


class ValidationError(ValueError):
    """
    A value did not match its schema.

    Attributes:
        path: Path of the mismatched field; ints are indices, strs are fields
        pretty_path: `path` formatted with `pretty_path`
        schema: Schema expected at `path`
        pretty_schema: `schema` formatted with base indent 2, increment 2
        value_type: Coarse kind of the value that was found
        message: Three-line summary of the above
    """

    def __init__(self, path: Path, schema: Any, value: Any):
        self._path = tuple(path)
        self._schema = schema
        self._value_type = value_type(value)
        self._pretty_path = pretty_path(self._path)
        self._pretty_schema = pretty_schema(schema, 2, 2)
        self._message = (
            f"validation error on field '{self._pretty_path}'\n"
            f"  expected '{self._pretty_schema}'\n"
            f"  got '{self._value_type}'"
        )
        super().__init__(self._message)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def pretty_path(self) -> str:
        return self._pretty_path

    @property
    def schema(self) -> Any:
        return self._schema

    @property
    def pretty_schema(self) -> str:
        return self._pretty_schema

    @property
    def value_type(self) -> str:
        return self._value_type

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"ValidationError(path={self._pretty_path!r}, "
            f"expected={self._pretty_schema!r}, got={self._value_type!r})"
        )

