"""
Tests for display helpers and ValidationError formatting.
"""

import pytest

from bodyguard import (
    NUMBER,
    UNDEFINED,
    Custom,
    CustomMetadata,
    ValidationError,
    either,
    pretty_path,
    pretty_schema,
    safe_integer,
    validate,
    value_type,
)


class TestPrettyPath:
    def test_fields_and_indices(self):
        assert pretty_path(("body", "items", 2, "name")) == "body.items[2].name"

    def test_single_segment(self):
        assert pretty_path(("body",)) == "body"

    def test_leading_index(self):
        assert pretty_path((0, "id")) == "[0].id"

    def test_consecutive_indices(self):
        assert pretty_path(["matrix", 1, 3]) == "matrix[1][3]"

    def test_empty(self):
        assert pretty_path(()) == ""


class TestPrettySchema:
    @pytest.mark.parametrize(
        "schema, expected",
        [
            (UNDEFINED, "undefined"),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (3.5, "3.5"),
            (2.0, "2"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            ("admin", '"admin"'),
            (str, "string"),
            (int, "number"),
            (bool, "boolean"),
            ([str], "string[]"),
            ([[float]], "number[][]"),
            ([float, str], "[number, string]"),
            ({}, "{}"),
        ],
    )
    def test_leaves(self, schema, expected):
        assert pretty_schema(schema) == expected

    def test_record(self):
        assert pretty_schema({"name": str, "age": safe_integer}) == (
            "{\n  name: string,\n  age: safe_integer,\n}"
        )

    def test_nested_record_indentation(self):
        schema = {"user": {"name": str}, "tags": [str]}
        assert pretty_schema(schema) == (
            "{\n  user: {\n    name: string,\n  },\n  tags: string[],\n}"
        )

    def test_base_indent_and_increment(self):
        assert pretty_schema({"a": {"b": str}}, 4, 2) == (
            "{\n      a: {\n          b: string,\n      },\n  }"
        )

    def test_custom_with_children(self):
        assert pretty_schema(either("user", "admin", None)) == 'either("user" | "admin" | null)'

    def test_custom_without_metadata(self):
        assert pretty_schema(lambda v, p: v) == "custom_validator"
        assert pretty_schema(Custom(lambda v, p: v)) == "custom_validator"

    def test_custom_named(self):
        assert pretty_schema(Custom(lambda v, p: v, CustomMetadata("password"))) == "password"

    def test_nested_record_in_either(self):
        assert pretty_schema(either({"id": float}, None)) == (
            "either({\n  id: number,\n} | null)"
        )

    def test_unknown_schema(self):
        assert pretty_schema(object()) == "unknown"
        assert pretty_schema([]) == "unknown"


class TestValueType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (UNDEFINED, "undefined"),
            (None, "null"),
            (True, "boolean"),
            (0, "number"),
            (1.5, "number"),
            ("secret", "string"),
            ([1], "array"),
            ((1, 2), "array"),
            ({"password": "x"}, "object"),
            (object(), "object"),
            (len, "unknown"),
            (int, "unknown"),
        ],
    )
    def test_kinds(self, value, expected):
        assert value_type(value) == expected


class TestValidationError:
    def test_fields(self):
        err = ValidationError(("body", "age"), NUMBER, "forty")
        assert err.path == ("body", "age")
        assert err.pretty_path == "body.age"
        assert err.schema == NUMBER
        assert err.pretty_schema == "number"
        assert err.value_type == "string"

    def test_message(self):
        err = ValidationError(("body", "age"), NUMBER, "forty")
        assert err.message == (
            "validation error on field 'body.age'\n  expected 'number'\n  got 'string'"
        )
        assert str(err) == err.message

    def test_message_uses_base_indent_two(self):
        with pytest.raises(ValidationError) as exc_info:
            validate([], {"user": {"name": str}})
        assert exc_info.value.pretty_schema == (
            "{\n    user: {\n      name: string,\n    },\n  }"
        )
        assert exc_info.value.value_type == "array"

    def test_value_never_leaks_into_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({"password": "hunter2-secret"}, {"password": float})
        assert "hunter2-secret" not in str(exc_info.value)
        assert "hunter2-secret" not in repr(exc_info.value)

    def test_is_value_error(self):
        assert issubclass(ValidationError, ValueError)

    def test_path_is_copied(self):
        path = ["body", "a"]
        err = ValidationError(path, NUMBER, None)
        path.append("b")
        assert err.path == ("body", "a")

    def test_read_only(self):
        err = ValidationError(("body",), NUMBER, None)
        with pytest.raises(AttributeError):
            err.path = ("other",)
