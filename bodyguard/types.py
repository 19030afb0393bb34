"""
Schema model for bodyguard.

A schema is one of eight frozen dataclasses. Native Python forms (types,
literals, lists, dicts, functions) are coerced into these by `to_schema`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Union

Path = tuple[str | int, ...]
CustomFn = Callable[[Any, Path], Any]


class _Undefined:
    """Sentinel for an absent value, distinct from None (null)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


@dataclass(frozen=True, slots=True)
class Literal:
    """Exact-value match on a string, number or boolean."""

    value: str | int | float | bool


@dataclass(frozen=True, slots=True)
class TypeTag:
    """Any value of a primitive kind: "string", "number" or "boolean"."""

    kind: str

    def __post_init__(self) -> None:
        if self.kind not in ("string", "number", "boolean"):
            raise ValueError(f"Unknown type tag: {self.kind!r}")


@dataclass(frozen=True, slots=True)
class ArrayOf:
    element: Any


@dataclass(frozen=True, slots=True)
class Tuple:
    elements: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True, slots=True)
class Record:
    """Structural object match; `fields` maps field names to schemas."""

    fields: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return dict(self.fields) == dict(other.fields)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.fields))


@dataclass(frozen=True, slots=True)
class Null:
    pass


@dataclass(frozen=True, slots=True)
class Undefined:
    pass


@dataclass(frozen=True, slots=True)
class CustomMetadata:
    """
    Display metadata for a custom validator.

    `schemas` are rendered inside parentheses after `name`, joined by
    `separator`. They are assumed to already be valid schemas.
    """

    name: str = "custom_validator"
    schemas: tuple[Any, ...] | None = None
    separator: str = ", "

    def __post_init__(self) -> None:
        if self.schemas is not None:
            object.__setattr__(self, "schemas", tuple(self.schemas))


@dataclass(frozen=True, slots=True, eq=False)
class Custom:
    """
    Validator expressed as code: `fn(value, path)` returns the narrowed value
    or raises a ValidationError built with that same path.

    Instances are callable with the same convention, so a Custom can be used
    anywhere a plain validator function is expected.
    """

    fn: CustomFn
    metadata: CustomMetadata | None = field(default=None)

    def __call__(self, value: Any, path: Path = ("body",)) -> Any:
        return self.fn(value, path)

    @property
    def name(self) -> str:
        return self.metadata.name if self.metadata else "custom_validator"


STRING = TypeTag("string")
NUMBER = TypeTag("number")
BOOLEAN = TypeTag("boolean")
NULL = Null()
UNDEFINED_SCHEMA = Undefined()

Schema = Union[Literal, TypeTag, ArrayOf, Tuple, Record, Custom, Null, Undefined]
SCHEMA_TYPES = (Literal, TypeTag, ArrayOf, Tuple, Record, Custom, Null, Undefined)


class SchemaError(TypeError):
    """A schema value that is none of the recognized shapes (programmer error)."""


def to_schema(schema: Any) -> Schema:
    """
    Coerce a native schema form to a schema model node.

    Conversion rules (one level deep; nested forms are coerced when reached):
        model node -> pass through
        UNDEFINED -> Undefined()
        None -> Null()
        bool | int | float | str instance -> Literal
        str -> STRING, int | float -> NUMBER, bool -> BOOLEAN
        list | tuple of one schema -> ArrayOf
        list | tuple of several schemas -> Tuple
        dict -> Record
        other callable -> Custom without metadata

    Raises:
        SchemaError: if the value is not a recognized schema shape
    """
    if isinstance(schema, SCHEMA_TYPES):
        return schema

    if schema is UNDEFINED:
        return UNDEFINED_SCHEMA
    if schema is None:
        return NULL

    if isinstance(schema, (bool, int, float, str)):
        return Literal(schema)

    if isinstance(schema, type):
        if schema is bool:
            return BOOLEAN
        if schema is int or schema is float:
            return NUMBER
        if schema is str:
            return STRING
        raise SchemaError(
            f"invalid schema: type {schema.__name__} (use instance_of() for classes)"
        )

    if isinstance(schema, (list, tuple)):
        if len(schema) == 0:
            raise SchemaError("invalid schema: empty list")
        if len(schema) == 1:
            return ArrayOf(schema[0])
        return Tuple(tuple(schema))

    if isinstance(schema, Mapping):
        return Record(schema)

    if callable(schema):
        return Custom(schema)

    raise SchemaError(f"invalid schema: {type(schema).__name__}")


def is_optional(schema: Any) -> bool:
    """
    True if a record field with this schema may be omitted.

    Only explicit markers count: `UNDEFINED` itself, or an `either(...)` with
    an optional alternative. The schema is inspected, never run.
    """
    try:
        node = to_schema(schema)
    except SchemaError:
        return False
    if isinstance(node, Undefined):
        return True
    if isinstance(node, Custom) and node.metadata is not None:
        metadata = node.metadata
        if metadata.name == "either" and metadata.schemas is not None:
            return any(is_optional(s) for s in metadata.schemas)
    return False
