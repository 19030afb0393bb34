"""
Built-in custom validators and combinators.

Every validator here is a `Custom`: a `(value, path)` function paired with
display metadata, so `pretty_schema` can render it without special cases.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Any, Callable

from .core import validate
from .errors import ValidationError, value_type
from .types import Custom, CustomFn, CustomMetadata, Path

logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def custom(
    _func: CustomFn | None = None,
    *,
    name: str | None = None,
    schemas: tuple[Any, ...] | list[Any] | None = None,
    separator: str = ", ",
) -> Any:
    """
    Decorator that turns a `(value, path)` function into a named validator.

    Can be used with or without arguments:
        @custom
        def password(value, path): ...

        @custom(name="password")
        def check_password(value, path): ...

    The function should raise `ValidationError(path, <the validator>, value)`
    on mismatch; the decorated name refers to the validator, so it can be used
    as the expected schema.

    Args:
        name: Display name, defaults to the function name
        schemas: Child schemas rendered as `name(a, b)`
        separator: Joins child schemas in the rendering
    """

    def decorator(func: CustomFn) -> Custom:
        metadata = CustomMetadata(
            name=name or getattr(func, "__name__", "custom_validator"),
            schemas=tuple(schemas) if schemas is not None else None,
            separator=separator,
        )
        return Custom(func, metadata)

    # Handle both @custom and @custom(...) syntax
    if _func is not None:
        return decorator(_func)
    return decorator


def either(*schemas: Any) -> Custom:
    """
    Accept a value matching any of `schemas`, tried in order.

    The first match wins. If none match, the ValidationError names the
    `either` validator itself as the expected schema. Errors other than
    ValidationError from a sub-schema are not caught.

    Usage:
        either("user", "admin")
        either(UNDEFINED, safe_integer)   # optional field
    """

    def check(value: Any, path: Path) -> Any:
        for schema in schemas:
            try:
                return validate(value, schema, path)
            except ValidationError as e:
                logger.debug("either: alternative rejected at %s", e.pretty_path)
        raise ValidationError(path, handler, value)

    handler = Custom(check, CustomMetadata("either", schemas, " | "))
    return handler


def all_of(*schemas: Any) -> Custom:
    """
    Validate against each schema in turn, feeding each narrowed result to the
    next one.

    Deprecated: with record schemas the result of one step only holds that
    record's fields, so later steps see a different object than the caller
    passed. Prefer a custom validator.
    """
    warnings.warn(
        "all_of() is deprecated; intersecting record schemas narrows fields "
        "unpredictably. Use a custom validator instead.",
        DeprecationWarning,
        stacklevel=2,
    )

    def check(value: Any, path: Path) -> Any:
        for schema in schemas:
            value = validate(value, schema, path)
        return value

    return Custom(check, CustomMetadata("all", schemas, " & "))


def _safe_integer(value: Any, path: Path) -> int | float:
    if value_type(value) == "number" and _is_safe_integer(value):
        return value
    raise ValidationError(path, safe_integer, value)


def _is_safe_integer(value: int | float) -> bool:
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


safe_integer = Custom(_safe_integer, CustomMetadata("safe_integer"))
"""Integer between -(2**53 - 1) and 2**53 - 1; integral floats are accepted as-is."""


def instance_of(cls: type) -> Custom:
    """
    Accept instances of `cls` (subclasses included).

    Usage:
        validate(request.files["avatar"], instance_of(UploadFile))
    """

    def check(value: Any, path: Path) -> Any:
        if not isinstance(value, cls):
            raise ValidationError(path, handler, value)
        return value

    handler = Custom(check, CustomMetadata(f"instance_of({cls.__name__})"))
    return handler


def _accept(value: Any, path: Path) -> Any:
    return value


any_value: Custom = Custom(_accept, CustomMetadata("any"))
"""Accept anything; the result is typed as `Any`."""

unknown: Custom = Custom(_accept, CustomMetadata("unknown"))
"""Accept anything; the result should be treated as `object` and narrowed by the caller."""


def predicate(fn: Callable[[Any], bool], name: str) -> Custom:
    """
    Build a validator from a boolean check.

    Usage:
        non_empty = predicate(lambda v: isinstance(v, str) and v != "", "non_empty")
    """

    def check(value: Any, path: Path) -> Any:
        if not fn(value):
            raise ValidationError(path, handler, value)
        return value

    handler = Custom(check, CustomMetadata(name))
    return handler
