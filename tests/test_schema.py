import pytest

from jsform.core import (
    ArrayNode, BooleanNode, BooleanVariant, InputKind, NumberNode, ObjectNode, SchemaError, StringNode,
    StringVariant, boolean_variant, input_kind, parse_schema, string_variant,
)


# --- parsing -------------------------------------------------------------------
def test_parse_nested_schema(person_schema):
    node = parse_schema(person_schema)
    assert isinstance(node, ObjectNode)
    assert list(node.properties) == ["name", "age", "email", "is_active", "tags"]
    assert isinstance(node.properties["age"], NumberNode)
    assert node.properties["age"].is_integer
    tags = node.properties["tags"]
    assert isinstance(tags, ArrayNode)
    assert isinstance(tags.items, StringNode)
    assert node.required == ["name", "email"]


@pytest.mark.parametrize("raw", [
    {"title": "no type"},
    {"type": "null"},
    {"type": "object", "properties": {"x": {"type": "tuple"}}},
    {"type": "boolean", "oneOf": [{"const": "yes"}, {"const": False}]},
])
def test_parse_rejects_unsupported(raw):
    with pytest.raises(SchemaError):
        parse_schema(raw)


def test_schema_error_is_value_error():
    with pytest.raises(ValueError):
        parse_schema({"type": "weird"})


def test_ui_hint_string_and_mapping():
    a = parse_schema({"type": "string", "uiSchema": "textarea"})
    b = parse_schema({"type": "string", "uiSchema": {"component": "textarea"}})
    assert a.hint == b.hint == "textarea"


def test_default_presence_tracked():
    assert parse_schema({"type": "string", "default": None}).has_default
    assert not parse_schema({"type": "string"}).has_default


def test_option_label_falls_back_to_const():
    node = parse_schema({"type": "string", "oneOf": [{"const": "a", "title": "Alpha"}, {"const": "b"}]})
    assert [o.label() for o in node.one_of] == ["Alpha", "b"]


# --- dispatch ------------------------------------------------------------------
@pytest.mark.parametrize("raw, expected", [
    ({"type": "string"}, StringVariant.INPUT),
    ({"type": "string", "enum": ["a", "b"]}, StringVariant.SELECT),
    ({"type": "string", "oneOf": [{"const": "a"}]}, StringVariant.SELECT),
    ({"type": "string", "format": "date"}, StringVariant.DATE),
    ({"type": "string", "format": "date-time"}, StringVariant.DATE),
    ({"type": "string", "format": "datetime"}, StringVariant.DATE),
    ({"type": "string", "uiSchema": "textarea"}, StringVariant.TEXTAREA),
    # choices win over format, format wins over the hint
    ({"type": "string", "enum": ["2020-01-01"], "format": "date"}, StringVariant.SELECT),
    ({"type": "string", "format": "date", "uiSchema": "textarea"}, StringVariant.DATE),
])
def test_string_variant(raw, expected):
    assert string_variant(parse_schema(raw)) is expected


@pytest.mark.parametrize("raw, expected", [
    ({"type": "string"}, InputKind.TEXT),
    ({"type": "string", "format": "password"}, InputKind.PASSWORD),
    ({"type": "string", "format": "email"}, InputKind.EMAIL),
    ({"type": "string", "format": "url"}, InputKind.URL),
    ({"type": "string", "uiSchema": {"component": "tel"}}, InputKind.TEL),
    ({"type": "string", "format": "hostname"}, InputKind.TEXT),
])
def test_input_kind(raw, expected):
    assert input_kind(parse_schema(raw)) is expected


YES_NO = [{"const": True, "title": "Yes"}, {"const": False, "title": "No"}]


@pytest.mark.parametrize("raw, expected", [
    ({"type": "boolean"}, BooleanVariant.CHECKBOX),
    ({"type": "boolean", "uiSchema": "radio", "oneOf": YES_NO}, BooleanVariant.RADIO),
    ({"type": "boolean", "uiSchema": {"component": "switch"}, "oneOf": YES_NO}, BooleanVariant.SWITCH),
    # radio/switch without a true/false pair fall back to a checkbox
    ({"type": "boolean", "uiSchema": "radio"}, BooleanVariant.CHECKBOX),
    ({"type": "boolean", "uiSchema": "switch", "oneOf": YES_NO[:1]}, BooleanVariant.CHECKBOX),
    ({"type": "boolean", "oneOf": YES_NO}, BooleanVariant.CHECKBOX),
])
def test_boolean_variant(raw, expected):
    node = parse_schema(raw)
    assert isinstance(node, BooleanNode)
    assert boolean_variant(node) is expected
