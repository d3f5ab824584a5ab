from __future__ import annotations

from enum import Enum

from .schema import BooleanNode, StringNode

DATE_FORMATS = ("date", "datetime", "date-time")
INPUT_FORMATS = ("password", "email", "url")


class StringVariant(Enum):
    SELECT = "select"
    DATE = "date"
    TEXTAREA = "textarea"
    INPUT = "input"


class InputKind(Enum):
    TEXT = "text"
    PASSWORD = "password"
    EMAIL = "email"
    URL = "url"
    TEL = "tel"


class BooleanVariant(Enum):
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SWITCH = "switch"


def string_variant(node: StringNode) -> StringVariant:
    """ Pick the string template, most specific first: choices, then format, then hint. """
    if node.enum is not None or node.one_of is not None:
        return StringVariant.SELECT
    if node.format in DATE_FORMATS:
        return StringVariant.DATE
    if node.hint == "textarea":
        return StringVariant.TEXTAREA
    return StringVariant.INPUT


def input_kind(node: StringNode) -> InputKind:
    if node.format in INPUT_FORMATS:
        return InputKind(node.format)
    if node.hint == "tel":
        return InputKind.TEL
    return InputKind.TEXT


def is_true_false_pair(node: BooleanNode) -> bool:
    opts = node.one_of or []
    return len(opts) == 2 and {opt.const for opt in opts} == {True, False}


def boolean_variant(node: BooleanNode) -> BooleanVariant:
    """ Radio and switch need a ``oneOf`` of exactly a true and a false option, anything else is a checkbox. """
    if node.hint in ("radio", "switch") and is_true_false_pair(node):
        return BooleanVariant(node.hint)
    return BooleanVariant.CHECKBOX
