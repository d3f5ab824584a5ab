from __future__ import annotations

import copy
from typing import Any

from .schema import ArrayNode, ObjectNode, SchemaNode

# Marks "no value", distinct from an explicit null default.
_ABSENT = object()


def _generate(node: SchemaNode) -> Any:
    if isinstance(node, ObjectNode):
        result = {}
        for name, child in node.properties.items():
            value = _generate(child)
            if value is not _ABSENT:
                result[name] = value
        return result
    if isinstance(node, ArrayNode):
        # Never pre-populated, minItems or not.
        return []
    if node.has_default:
        return copy.deepcopy(node.default)
    return _ABSENT


def generate_initial_data(node: SchemaNode) -> Any:
    """ Build the default data value for a schema node.

    Objects are filled per property, arrays start empty and primitives take
    their declared ``default`` or are left out. Safe to call repeatedly, every
    call returns fresh containers.

    Parameters
    ----------
    node : SchemaNode
        The node to generate for.

    Returns
    -------
    value : Any
        The default value, or None for a primitive without a default.
    """
    value = _generate(node)
    return None if value is _ABSENT else value
