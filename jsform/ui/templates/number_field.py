from __future__ import annotations

from typing import Any

from PySide6.QtCore import QLocale, QRegularExpression
from PySide6.QtGui import QDoubleValidator, QRegularExpressionValidator
from PySide6.QtWidgets import QLineEdit, QCompleter

from .base import PrimitiveTemplate


def parse_number(text: str, integer: bool = False) -> int | float | None:
    """ Parse editor text. Empty text is None (unset, not zero); unparsable text raises ValueError. """
    text = text.strip()
    if not text:
        return None
    if integer:
        return int(text)
    try:
        return int(text)
    except ValueError:
        return float(text)


def format_number(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class NumberField(PrimitiveTemplate):
    """ Free numeric entry. ``examples`` are offered as suggestions only. """

    def _build_editor(self) -> None:
        self._add(self._title_label())

        self.editor = QLineEdit(self)
        self.editor.setPlaceholderText(self.node.title or "")
        if self.node.is_integer:
            # Any length, JSON integers have no 32-bit limit
            validator = QRegularExpressionValidator(QRegularExpression(r"[+-]?\d*"), self.editor)
        else:
            validator = QDoubleValidator(self.editor)
            validator.setNotation(QDoubleValidator.ScientificNotation)
            validator.setLocale(QLocale.c())
        self.editor.setValidator(validator)

        if self.node.examples:
            completer = QCompleter([format_number(e) for e in self.node.examples], self.editor)
            completer.setCompletionMode(QCompleter.UnfilteredPopupCompletion)
            self.editor.setCompleter(completer)
            completer.activated.connect(self._on_text_edited)

        self.editor.textEdited.connect(self._on_text_edited)
        self._add(self.editor)

        self._add(self._description_label())
        self._add(self.errors)

    def _on_text_edited(self, text: str) -> None:
        try:
            value = parse_number(text, self.node.is_integer)
        except ValueError:
            return  # still typing, e.g. "-" or "1e"
        self.write(value)

    def show_value(self, value: Any) -> None:
        try:
            if parse_number(self.editor.text(), self.node.is_integer) == value:
                return  # keep the user's own spelling, e.g. "1.50"
        except ValueError:
            pass
        self.editor.setText(format_number(value))

    def display_text(self, value: Any) -> str:
        return super().display_text(value) if value is None else format_number(value)
