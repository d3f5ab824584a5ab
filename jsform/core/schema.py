from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import SchemaError

# Reserved presentation key, never seen by the validator.
UI_HINT_KEY = "uiSchema"


class Option(BaseModel):
    """One entry of a ``oneOf`` list: a constant value and its display label."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    const: Any
    title: str | None = None

    def label(self) -> str:
        return self.title if self.title is not None else str(self.const)


class _NodeBase(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    default: Any = None
    ui_schema: str | None = Field(default=None, alias=UI_HINT_KEY)

    @field_validator("ui_schema", mode="before")
    @classmethod
    def _component_name(cls, value: Any) -> Any:
        # Accept both "uiSchema": "radio" and "uiSchema": {"component": "radio"}
        if isinstance(value, dict):
            return value.get("component")
        return value

    @property
    def hint(self) -> str | None:
        return self.ui_schema

    @property
    def has_default(self) -> bool:
        """True when the schema declares ``default``, even an explicit null."""
        return "default" in self.model_fields_set


class StringNode(_NodeBase):
    type: Literal["string"]
    enum: list[Any] | None = None
    one_of: list[Option] | None = Field(default=None, alias="oneOf")
    format: str | None = None
    examples: list[Any] | None = None


class NumberNode(_NodeBase):
    type: Literal["number", "integer"]
    examples: list[Any] | None = None
    minimum: float | None = None
    maximum: float | None = None

    @property
    def is_integer(self) -> bool:
        return self.type == "integer"


class BooleanNode(_NodeBase):
    type: Literal["boolean"]
    one_of: list[Option] | None = Field(default=None, alias="oneOf")

    @field_validator("one_of")
    @classmethod
    def _bool_consts(cls, value: list[Option] | None) -> list[Option] | None:
        if value is not None:
            for opt in value:
                if not isinstance(opt.const, bool):
                    raise ValueError(f"boolean oneOf const must be true or false, got {opt.const!r}")
        return value

    def option_for(self, value: bool) -> Option | None:
        for opt in self.one_of or []:
            if opt.const is value:
                return opt
        return None


class ObjectNode(_NodeBase):
    type: Literal["object"]
    properties: dict[str, SchemaNode] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class ArrayNode(_NodeBase):
    type: Literal["array"]
    items: SchemaNode | None = None


SchemaNode = Annotated[
    Union[StringNode, NumberNode, BooleanNode, ObjectNode, ArrayNode],
    Field(discriminator="type"),
]

ObjectNode.model_rebuild()
ArrayNode.model_rebuild()

_ADAPTER = TypeAdapter(SchemaNode)


def parse_schema(raw: dict) -> SchemaNode:
    """ Parse a raw JSON schema mapping into the node tree used for rendering.

    Parameters
    ----------
    raw : dict
        An already-loaded JSON schema document.

    Returns
    -------
    node : SchemaNode
        The root node. Unknown validation keywords are dropped from the nodes,
        the raw document is what gets validated against.

    Raises
    ------
    SchemaError
        If any node has an absent or unsupported ``type`` or an illegal field.
    """
    try:
        return _ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise SchemaError(f"Unsupported schema: {e}") from e


def child_node(node: SchemaNode | None, segment: str) -> SchemaNode | None:
    """The schema node one path segment below ``node``, if the schema knows it."""
    if isinstance(node, ObjectNode):
        return node.properties.get(segment)
    if isinstance(node, ArrayNode):
        return node.items
    return None
