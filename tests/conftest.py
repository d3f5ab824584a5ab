import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from jsform.core import FormState, parse_schema


# --- Schema fixtures -----------------------------------------------------------
@pytest.fixture()
def person_schema():
    return {
        "type": "object",
        "title": "Person",
        "properties": {
            "name": {"type": "string", "title": "Name"},
            "age": {"type": "integer", "title": "Age"},
            "email": {"type": "string", "title": "Email", "format": "email"},
            "is_active": {"type": "boolean", "title": "Active"},
            "tags": {"type": "array", "title": "Tags", "items": {"type": "string", "title": "Tag"}},
        },
        "required": ["name", "email"],
    }


@pytest.fixture()
def tags_schema():
    return {
        "type": "object",
        "properties": {
            "tags": {"type": "array", "items": {"type": "string"}},
        },
    }


# --- State fixtures ------------------------------------------------------------
@pytest.fixture()
def make_state():
    """ Build a FormState from a raw schema and some data. """
    def _mk(schema: dict | None = None, data=None, readonly: bool = False) -> FormState:
        node = parse_schema(schema) if schema is not None else None
        return FormState(node, data, readonly=readonly)

    return _mk
