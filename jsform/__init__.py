from .core import (
    UI_HINT_KEY, FormError, FormState, Direction, SchemaError, ShapeError,
    compile_schema, generate_initial_data, parse_schema, strip_ui_hints,
)
