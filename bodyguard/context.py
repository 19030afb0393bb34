"""
Context manager for validation configuration (e.g., nesting depth limit).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_MAX_DEPTH = 100

# Context variable for the maximum path length the engine will descend to
_max_depth: ContextVar[int] = ContextVar("max_depth", default=DEFAULT_MAX_DEPTH)


def get_max_depth() -> int:
    """Return the nesting limit currently in effect."""
    return _max_depth.get()


@contextmanager
def validation_context(*, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Context manager for validation configuration.

    Args:
        max_depth: Longest path `validate` will descend to. Going deeper raises
                  SchemaError instead of exhausting the interpreter stack.
                  With a recursive custom schema (a comment tree, say) the
                  depth is set by the incoming data, not the schema, so deep
                  client input also ends in SchemaError. Raise the limit to
                  cover the deepest data you accept, or bound the depth inside
                  the custom validator and raise ValidationError there.

    Example:
        from bodyguard import validate, validation_context

        with validation_context(max_depth=16):
            validate(payload, deeply_nested_schema)  # SchemaError past 16 levels
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    token = _max_depth.set(max_depth)
    try:
        yield
    finally:
        _max_depth.reset(token)
