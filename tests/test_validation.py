import copy

import pytest
from jsonschema.exceptions import SchemaError as InvalidSchema

from jsform.core import FormState, compile_schema, parse_schema, strip_ui_hints, submit


# --- UI hint stripping ---------------------------------------------------------
def test_strip_removes_hints_at_every_depth():
    schema = {
        "type": "object",
        "uiSchema": "x",
        "properties": {
            "a": {
                "type": "object",
                "uiSchema": {"component": "y"},
                "properties": {
                    "b": {"type": "array", "uiSchema": "z", "items": {"type": "string", "uiSchema": "tel"}},
                },
            },
        },
    }
    before = copy.deepcopy(schema)
    clean = strip_ui_hints(schema)
    assert clean == {
        "type": "object",
        "properties": {
            "a": {
                "type": "object",
                "properties": {"b": {"type": "array", "items": {"type": "string"}}},
            },
        },
    }
    assert schema == before


def test_strip_walks_lists_and_keeps_other_keys():
    schema = {"oneOf": [{"const": 1, "uiSchema": "radio", "title": "One"}], "x-custom": 1}
    assert strip_ui_hints(schema) == {"oneOf": [{"const": 1, "title": "One"}], "x-custom": 1}


def test_strip_custom_keys():
    assert strip_ui_hints({"a": 1, "b": {"c": 2}}, keys=("c",)) == {"a": 1, "b": {}}


# --- validate ------------------------------------------------------------------
def test_valid_data_has_no_errors(person_schema):
    validate = compile_schema(person_schema)
    result = validate({"name": "Ann", "email": "ann@example.com", "age": 3, "tags": ["a"]})
    assert result.valid
    assert result.errors == []


def test_missing_required_is_reported_at_property(person_schema):
    validate = compile_schema(person_schema)
    result = validate({"email": "ann@example.com"})
    assert not result.valid
    assert [(e.path, e.rule) for e in result.errors] == [(("name",), "required")]


def test_nested_errors_carry_full_path():
    validate = compile_schema({
        "type": "object",
        "properties": {"l": {"type": "array", "items": {"type": "integer"}}},
    })
    result = validate({"l": [1, "two"]})
    assert [(e.path, e.rule) for e in result.errors] == [(("l", "1"), "type")]


@pytest.mark.parametrize("fmt, good, bad", [
    ("email", "a@b.co", "not-an-email"),
    ("date", "2024-02-29", "2024-13-01"),
    ("url", "https://example.com/x", "example"),
    ("url", "ftp://files.example.com", "mailto:a@b.co"),
    ("datetime", "2024-01-01T10:30", "yesterday"),
    ("date-time", "2024-01-01T10:30:00Z", "yesterday"),
    ("date-time", "2024-01-01T10:30:00+02:00", "2024-01-01T10:30"),
    ("uri", "https://example.com/a?b=c", "not a uri"),
    ("time", "10:30:00Z", "25:99"),
])
def test_formats_are_checked(fmt, good, bad):
    validate = compile_schema({"type": "string", "format": fmt})
    assert validate(good).valid
    result = validate(bad)
    assert not result.valid
    assert result.errors[0].rule == "format"


def test_ui_hints_do_not_reach_strict_validator():
    schema = {
        "type": "object",
        "additionalProperties": False,
        "uiSchema": "card",
        "properties": {"a": {"type": "string", "uiSchema": "textarea"}},
    }
    assert compile_schema(schema)({"a": "x"}).valid


def test_invalid_schema_raises():
    with pytest.raises(InvalidSchema):
        compile_schema({"type": 12})


# --- submit --------------------------------------------------------------------
def test_submit_success_calls_on_submit(person_schema):
    data = {"name": "Ann", "email": "ann@example.com", "tags": []}
    state = FormState(parse_schema(person_schema), data)
    seen = []
    result = submit(state, compile_schema(person_schema), on_submit=seen.append,
                    on_error=lambda errors, d: pytest.fail("unexpected errors"))
    assert result.valid
    assert seen == [data]
    assert seen[0] is state.data()
    assert state.errors() == []


def test_submit_failure_stores_errors(person_schema):
    state = FormState(parse_schema(person_schema), {"tags": []})
    calls = []
    result = submit(state, compile_schema(person_schema), on_submit=lambda d: pytest.fail("submitted"),
                    on_error=lambda errors, d: calls.append((errors, d)))
    assert not result.valid
    assert [e.path for e in state.errors()] == [("email",), ("name",)]
    assert calls == [(result.errors, {"tags": []})]


def test_successful_submit_clears_old_errors(person_schema):
    state = FormState(parse_schema(person_schema), {})
    validate = compile_schema(person_schema)
    submit(state, validate)
    assert state.errors()
    state.set(["name"], "Ann")
    state.set(["email"], "ann@example.com")
    assert submit(state, validate).valid
    assert state.errors() == []
