from .errors import JsformError, SchemaError, ShapeError
from .schema import (
    UI_HINT_KEY, Option, SchemaNode, StringNode, NumberNode, BooleanNode, ObjectNode, ArrayNode,
    parse_schema, child_node,
)
from .dispatch import StringVariant, InputKind, BooleanVariant, string_variant, input_kind, boolean_variant
from .initial_data import generate_initial_data
from .validation import FormError, ValidationResult, strip_ui_hints, compile_schema, submit
from .state import FormState, Direction, normalize_path
