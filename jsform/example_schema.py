# example_schema.py
PERSON_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/person.schema.json",
    "title": "Person",
    "description": "Basic contact details.",
    "type": "object",
    "properties": {
        "firstName": {"type": "string", "title": "First Name", "minLength": 1},
        "lastName": {"type": "string", "title": "Last Name", "minLength": 1},
        "age": {
            "type": "integer",
            "title": "Age",
            "minimum": 0,
            "examples": [18, 30, 65]
        },
        "email": {"type": "string", "title": "Email", "format": "email"},
        "homepage": {"type": "string", "title": "Homepage", "format": "url"},
        "phone": {"type": "string", "title": "Phone", "uiSchema": {"component": "tel"}},
        "password": {"type": "string", "title": "Password", "format": "password"},
        "birthday": {"type": "string", "title": "Birthday", "format": "date"},
        "bio": {
            "type": "string",
            "title": "Bio",
            "description": "A few words about yourself.",
            "uiSchema": {"component": "textarea"}
        },
        "role": {
            "type": "string",
            "title": "Role",
            "oneOf": [
                {"const": "gm", "title": "Game Master"},
                {"const": "player", "title": "Player"}
            ]
        },
        "is_active": {"type": "boolean", "title": "Active"},
        "newsletter": {
            "type": "boolean",
            "title": "Newsletter",
            "uiSchema": {"component": "radio"},
            "oneOf": [
                {"const": True, "title": "Yes"},
                {"const": False, "title": "No"}
            ]
        },
        "notifications": {
            "type": "boolean",
            "title": "Notifications",
            "uiSchema": {"component": "switch"},
            "oneOf": [
                {"const": True, "title": "On"},
                {"const": False, "title": "Off"}
            ]
        },
        "address": {
            "type": "object",
            "title": "Address",
            "properties": {
                "street_address": {"type": "string", "title": "Street Address"},
                "city": {"type": "string", "title": "City"},
                "state": {"type": "string", "title": "State", "enum": ["CA", "NY", "TX", "WA"]}
            },
            "required": ["street_address", "city", "state"]
        },
        "tags": {
            "type": "array",
            "title": "Tags",
            "items": {"type": "string", "title": "Tag"}
        }
    },
    "required": ["firstName", "lastName", "email"]
}

PERSON_DATA = {
    "firstName": "John Doe",
    "lastName": "Doe",
    "age": 30,
    "email": "john.doe@example.com",
    "homepage": "https://example.com",
    "birthday": "1990-01-01",
    "is_active": True,
    "address": {
        "street_address": "123 Main St",
        "city": "Somewhere",
        "state": "CA"
    },
    "tags": []
}
