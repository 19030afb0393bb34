"""
Bodyguard - validate values of unknown shape against declarative schemas.

Usage:
    from bodyguard import either, safe_integer, validate

    body = validate(request_json, {
        "name": str,
        "role": either("user", "admin"),
        "age": safe_integer,
        "coordinates": [float, float],
    })

On mismatch a ValidationError is raised; its message is safe to display.
"""

from .context import get_max_depth, validation_context
from .core import validate
from .errors import ValidationError, value_type
from .pretty import pretty_path, pretty_schema
from .schema import to_pydantic, to_type_hint
from .types import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    UNDEFINED,
    UNDEFINED_SCHEMA,
    ArrayOf,
    Custom,
    CustomMetadata,
    Literal,
    Null,
    Path,
    Record,
    Schema,
    SchemaError,
    Tuple,
    TypeTag,
    Undefined,
    is_optional,
    to_schema,
)
from .validators import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    all_of,
    any_value,
    custom,
    either,
    instance_of,
    predicate,
    safe_integer,
    unknown,
)

__all__ = [
    # Engine
    "validate",
    "to_schema",
    "is_optional",
    # Errors
    "ValidationError",
    "SchemaError",
    "value_type",
    # Display
    "pretty_path",
    "pretty_schema",
    # Schema model
    "Schema",
    "Path",
    "Literal",
    "TypeTag",
    "ArrayOf",
    "Tuple",
    "Record",
    "Custom",
    "CustomMetadata",
    "Null",
    "Undefined",
    "STRING",
    "NUMBER",
    "BOOLEAN",
    "NULL",
    "UNDEFINED",
    "UNDEFINED_SCHEMA",
    # Validators
    "custom",
    "either",
    "all_of",
    "safe_integer",
    "instance_of",
    "any_value",
    "unknown",
    "predicate",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Configuration
    "validation_context",
    "get_max_depth",
    # Pydantic
    "to_type_hint",
    "to_pydantic",
]
