from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Callable, Iterable

from jsonschema import FormatChecker
from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft202012Validator, validator_for
from pydantic import BaseModel, ConfigDict, Field
from rfc3986_validator import validate_rfc3986

from .schema import UI_HINT_KEY

if TYPE_CHECKING:
    from .state import FormState

logger = logging.getLogger(__name__)

FORMAT_CHECKER = FormatChecker()
_LOCAL_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?$")


@FORMAT_CHECKER.checks("url")
def _is_url(instance: Any) -> bool:
    if not isinstance(instance, str):
        return True
    # An absolute web URI with an authority part, e.g. "https://host/path"
    if not validate_rfc3986(instance, rule="URI"):
        return False
    scheme, _, rest = instance.partition(":")
    return scheme.lower() in ("http", "https", "ftp") and rest.startswith("//") and len(rest) > 2


@FORMAT_CHECKER.checks("datetime")
def _is_local_datetime(instance: Any) -> bool:
    # Same shape a datetime-local input produces: no timezone.
    if not isinstance(instance, str):
        return True
    return bool(_LOCAL_DATETIME.match(instance))


class FormError(BaseModel):
    """A validation failure at one path of the form data."""
    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...]
    message: str
    rule: str
    schema_path: tuple[str, ...] = ()


class ValidationResult(BaseModel):
    valid: bool
    errors: list[FormError] = Field(default_factory=list)


def strip_ui_hints(schema: Any, keys: Iterable[str] = (UI_HINT_KEY,)) -> Any:
    """ Return a copy of the schema with presentation-only keys removed at every depth.

    Parameters
    ----------
    schema : Any
        The schema (or any nested part of it). Dicts and lists are walked, other values are kept as is.
    keys : iterable of str
        The keys to drop.

    Returns
    -------
    clean : Any
        A new structure, the input is left untouched.
    """
    keys = frozenset(keys)
    if isinstance(schema, dict):
        return {k: strip_ui_hints(v, keys) for k, v in schema.items() if k not in keys}
    if isinstance(schema, list):
        return [strip_ui_hints(item, keys) for item in schema]
    return schema


def _missing_property(error: ValidationError) -> str | None:
    instance = error.instance if isinstance(error.instance, dict) else {}
    missing = [p for p in error.validator_value if p not in instance]
    for prop in missing:
        if error.message.startswith(repr(prop)):
            return prop
    return missing[0] if missing else None


def to_form_error(error: ValidationError) -> FormError:
    """ Convert a jsonschema error to a FormError. Missing required properties are reported at the property. """
    path = tuple(str(seg) for seg in error.absolute_path)
    if error.validator == "required":
        prop = _missing_property(error)
        if prop is not None:
            path = (*path, str(prop))
    return FormError(
        path=path,
        message=error.message,
        rule=str(error.validator),
        schema_path=tuple(str(seg) for seg in error.absolute_schema_path),
    )


def compile_schema(schema: dict) -> Callable[[Any], ValidationResult]:
    """ Compile a raw schema into a validate function.

    UI hints are stripped first so a strict validator never sees them. Raises
    jsonschema.exceptions.SchemaError if the schema itself is invalid.
    """
    clean = strip_ui_hints(schema)
    cls = validator_for(clean, default=Draft202012Validator)
    cls.check_schema(clean)
    validator = cls(clean, format_checker=FORMAT_CHECKER)

    def validate(data: Any) -> ValidationResult:
        errors = [to_form_error(e) for e in validator.iter_errors(data)]
        errors.sort(key=lambda e: (e.path, e.rule))
        return ValidationResult(valid=not errors, errors=errors)

    return validate


def submit(state: FormState, validate: Callable[[Any], ValidationResult],
           on_submit: Callable[[Any], None] | None = None,
           on_error: Callable[[list[FormError], Any], None] | None = None) -> ValidationResult:
    """ Validate the whole data tree once, update the state's errors and call back. """
    data = state.data()
    result = validate(data)
    if result.valid:
        logger.info("Form submitted")
        state.set_errors(None)
        if on_submit:
            on_submit(data)
    else:
        logger.info("Form has %d validation error(s)", len(result.errors))
        state.set_errors(result.errors)
        if on_error:
            on_error(result.errors, data)
    return result
