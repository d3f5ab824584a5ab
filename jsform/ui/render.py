from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Callable, Iterable, Mapping

from PySide6.QtWidgets import QWidget

from jsform.core import (
    ArrayNode, BooleanNode, FormState, NumberNode, ObjectNode, SchemaError, SchemaNode, StringNode,
    normalize_path,
)

Template = Callable[[SchemaNode, tuple, FormState, "TemplateSet", "QWidget | None"], QWidget]

# Public names of the template slots, as used in template set mappings.
TEMPLATE_KEYS = {
    "StringTemplate": "string_template",
    "NumberTemplate": "number_template",
    "BooleanTemplate": "boolean_template",
    "ObjectTemplate": "object_template",
    "ArrayTemplate": "array_template",
}


@dataclass(frozen=True)
class TemplateSet:
    """ One renderer per schema type category. Swap the whole set to change the look without touching dispatch. """
    string_template: Template
    number_template: Template
    boolean_template: Template
    object_template: Template
    array_template: Template

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Template]) -> TemplateSet:
        """ Build a set from public keys ("StringTemplate", ...). Keys left out keep the default Qt templates. """
        from .templates import DEFAULT_TEMPLATES
        return DEFAULT_TEMPLATES.override(mapping)

    def override(self, mapping: Mapping[str, Template]) -> TemplateSet:
        """A copy with some templates replaced, the rest kept from this set."""
        _check_keys(mapping)
        return replace(self, **{TEMPLATE_KEYS[k]: v for k, v in mapping.items()})

    def as_mapping(self) -> dict[str, Template]:
        by_field = {f.name: getattr(self, f.name) for f in fields(self)}
        return {key: by_field[name] for key, name in TEMPLATE_KEYS.items()}


def _check_keys(mapping: Mapping[str, Template]) -> None:
    unknown = set(mapping) - set(TEMPLATE_KEYS)
    if unknown:
        raise ValueError(f"Unknown template keys: {sorted(unknown)}")


def render_node(node: SchemaNode, path: Iterable[str | int], state: FormState, templates: TemplateSet,
                parent: QWidget | None = None) -> QWidget:
    """ Render one schema node bound to the data at ``path``.

    Object and array templates call back into this function for their children, so calling it once at
    the root with the empty path renders the whole form.

    Raises
    ------
    SchemaError
        If the node is not one of the five supported node types.
    """
    path = normalize_path(path)
    if isinstance(node, ObjectNode):
        template = templates.object_template
    elif isinstance(node, ArrayNode):
        template = templates.array_template
    elif isinstance(node, StringNode):
        template = templates.string_template
    elif isinstance(node, NumberNode):
        template = templates.number_template
    elif isinstance(node, BooleanNode):
        template = templates.boolean_template
    else:
        raise SchemaError(f"No template for schema node {node!r} at {list(path)}")
    return template(node, path, state, templates, parent)
