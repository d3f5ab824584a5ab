from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt, QDate, QDateTime, QTime
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QLineEdit, QPlainTextEdit, QComboBox, QCompleter, QDateTimeEdit, QToolButton,
)

from jsform.core import StringNode, StringVariant, InputKind, string_variant, input_kind

from .base import PrimitiveTemplate

# Shown as an empty editor, stands for "no date".
_EMPTY_DATE = QDate(1752, 9, 14)

_INPUT_HINTS = {
    InputKind.EMAIL: Qt.ImhEmailCharactersOnly,
    InputKind.URL: Qt.ImhUrlCharactersOnly,
    InputKind.TEL: Qt.ImhDialableCharactersOnly,
}


class InputField(PrimitiveTemplate):
    """Single line text, with the input flavour picked from ``format`` or the ``tel`` hint."""

    def _build_editor(self) -> None:
        self.kind = input_kind(self.node)
        self._add(self._title_label())

        self.editor = QLineEdit(self)
        self.editor.setPlaceholderText(self.node.title or "")
        if self.kind is InputKind.PASSWORD:
            self.editor.setEchoMode(QLineEdit.Password)
        elif self.kind in _INPUT_HINTS:
            self.editor.setInputMethodHints(_INPUT_HINTS[self.kind])
        if self.node.examples:
            completer = QCompleter([str(e) for e in self.node.examples], self.editor)
            completer.setCaseSensitivity(Qt.CaseInsensitive)
            self.editor.setCompleter(completer)
        # textEdited only fires for user edits, so refresh() can't loop back into the store
        self.editor.textEdited.connect(lambda text: self.write(text or None))
        self._add(self.editor)

        self._add(self._description_label())
        self._add(self.errors)

    def show_value(self, value: Any) -> None:
        text = "" if value is None else str(value)
        if self.editor.text() != text:
            self.editor.setText(text)


class TextareaField(PrimitiveTemplate):

    def _build_editor(self) -> None:
        self._add(self._title_label())
        self.editor = QPlainTextEdit(self)
        self.editor.setPlaceholderText(self.node.title or "")
        self.editor.setMaximumHeight(120)
        self.editor.textChanged.connect(self._on_text_changed)
        self._add(self.editor)
        self._add(self._description_label())
        self._add(self.errors)

    def _on_text_changed(self) -> None:
        self.write(self.editor.toPlainText() or None)

    def show_value(self, value: Any) -> None:
        text = "" if value is None else str(value)
        if self.editor.toPlainText() != text:
            self.editor.blockSignals(True)
            self.editor.setPlainText(text)
            self.editor.blockSignals(False)


class SelectField(PrimitiveTemplate):
    """ A closed choice from ``enum`` or ``oneOf``. The first, blank entry unsets the value. """

    def _build_editor(self) -> None:
        self._add(self._title_label())
        self.editor = QComboBox(self)
        self.editor.addItem("", None)
        for value, label in self._options():
            self.editor.addItem(label, value)
        self.editor.activated.connect(lambda i: self.write(self.editor.itemData(i)))
        self._add(self.editor)
        self._add(self._description_label())
        self._add(self.errors)

    def _options(self) -> list[tuple[Any, str]]:
        if self.node.enum is not None:
            return [(v, str(v)) for v in self.node.enum]
        return [(opt.const, opt.label()) for opt in self.node.one_of or []]

    def display_text(self, value: Any) -> str:
        if value is None:
            return super().display_text(value)
        for option, label in self._options():
            if option == value:
                return label
        return str(value)

    def show_value(self, value: Any) -> None:
        index = 0
        if value is not None:
            for i in range(1, self.editor.count()):
                if self.editor.itemData(i) == value:
                    index = i
                    break
        self.editor.setCurrentIndex(index)


class DateField(PrimitiveTemplate):
    """ Date or date-time picker. Values are stored as ISO strings, "date-time" in UTC. """

    def _build_editor(self) -> None:
        self.date_format = self.node.format
        self._add(self._title_label())

        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        self.editor = QDateTimeEdit(self)
        self.editor.setCalendarPopup(True)
        self.editor.setDisplayFormat("yyyy-MM-dd" if self.date_format == "date" else "yyyy-MM-dd HH:mm")
        self.editor.setMinimumDateTime(QDateTime(_EMPTY_DATE, QTime(0, 0)))
        self.editor.setSpecialValueText(" ")
        self.editor.dateTimeChanged.connect(self._on_changed)
        row.addWidget(self.editor, 1)

        self.btn_clear = QToolButton(self)
        self.btn_clear.setText("×")
        self.btn_clear.setToolTip("Clear")
        self.btn_clear.clicked.connect(lambda: self.write(None))
        row.addWidget(self.btn_clear)
        self.root_layout.addLayout(row)

        self._add(self._description_label())
        self._add(self.errors)

    def _on_changed(self, dt: QDateTime) -> None:
        self.write(self.to_value(dt))

    def to_value(self, dt: QDateTime) -> str | None:
        if dt.date() == _EMPTY_DATE:
            return None
        if self.date_format == "date":
            return dt.date().toString("yyyy-MM-dd")
        if self.date_format == "datetime":
            return dt.toString("yyyy-MM-dd'T'HH:mm")
        return dt.toUTC().toString(Qt.ISODate)

    def from_value(self, value: Any) -> QDateTime | None:
        if not isinstance(value, str) or not value:
            return None
        if self.date_format == "date":
            date = QDate.fromString(value, "yyyy-MM-dd")
            return QDateTime(date, QTime(0, 0)) if date.isValid() else None
        dt = QDateTime.fromString(value, Qt.ISODate)
        if not dt.isValid():
            return None
        return dt.toLocalTime() if self.date_format == "date-time" else dt

    def show_value(self, value: Any) -> None:
        dt = self.from_value(value)
        if dt is None:
            dt = self.editor.minimumDateTime()
        if self.editor.dateTime() != dt:
            self.editor.blockSignals(True)
            self.editor.setDateTime(dt)
            self.editor.blockSignals(False)


_VARIANTS = {
    StringVariant.SELECT: SelectField,
    StringVariant.DATE: DateField,
    StringVariant.TEXTAREA: TextareaField,
    StringVariant.INPUT: InputField,
}


def string_template(node: StringNode, path: tuple[str, ...], state, templates,
                    parent: QWidget | None = None) -> PrimitiveTemplate:
    return _VARIANTS[string_variant(node)](node, path, state, templates, parent)
