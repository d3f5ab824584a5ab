from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QWidget, QHBoxLayout, QCheckBox, QRadioButton, QButtonGroup, QLabel

from jsform.core import BooleanNode, BooleanVariant, boolean_variant

from .base import PrimitiveTemplate


class CheckboxField(PrimitiveTemplate):
    """The default boolean template, used whenever no radio/switch option pair is declared."""

    def _build_editor(self) -> None:
        self.editor = QCheckBox(self.node.title or "", self)
        self.editor.clicked.connect(lambda checked: self.write(bool(checked)))
        self._add(self.editor)
        self._add(self._description_label())
        self._add(self.errors)

    def display_text(self, value: Any) -> str:
        return "true" if value else "false"

    def show_value(self, value: Any) -> None:
        self.editor.setChecked(bool(value))


class _OptionPairField(PrimitiveTemplate):
    """ Shared by radio and switch: both show the ``oneOf`` titles and store the option ``const``. """

    def display_text(self, value: Any) -> str:
        opt = self.node.option_for(bool(value))
        return opt.label() if opt is not None else str(bool(value)).lower()


class RadioField(_OptionPairField):

    def _build_editor(self) -> None:
        self._add(self._title_label())
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        self.group = QButtonGroup(self)
        self.buttons: dict[bool, QRadioButton] = {}
        for opt in self.node.one_of:
            btn = QRadioButton(opt.label(), self)
            self.group.addButton(btn)
            self.buttons[opt.const] = btn
            btn.clicked.connect(lambda _=False, v=opt.const: self.write(v))
            row.addWidget(btn)
        row.addStretch(1)
        self.root_layout.addLayout(row)
        self._add(self._description_label())
        self._add(self.errors)

    def show_value(self, value: Any) -> None:
        if value is None:
            # Exclusive groups can't show "nothing selected" otherwise
            self.group.setExclusive(False)
            for btn in self.buttons.values():
                btn.setChecked(False)
            self.group.setExclusive(True)
            return
        self.buttons[bool(value)].setChecked(True)


class SwitchField(_OptionPairField):
    """ "Off [toggle] On": the false option's title left of the toggle, the true option's right. """

    def _build_editor(self) -> None:
        self._add(self._title_label())
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(QLabel(self.node.option_for(False).label(), self))
        self.editor = QCheckBox(self)
        self.editor.setStyleSheet("""
            QCheckBox::indicator { width: 32px; height: 16px; border-radius: 8px; border: 1px solid #555; }
            QCheckBox::indicator:unchecked { background-color: #ccc; }
            QCheckBox::indicator:checked { background-color: #3b82f6; }
        """)
        self.editor.clicked.connect(lambda checked: self.write(bool(checked)))
        row.addWidget(self.editor)
        row.addWidget(QLabel(self.node.option_for(True).label(), self))
        row.addStretch(1)
        self.root_layout.addLayout(row)
        self._add(self._description_label())
        self._add(self.errors)

    def show_value(self, value: Any) -> None:
        self.editor.setChecked(bool(value))


_VARIANTS = {
    BooleanVariant.CHECKBOX: CheckboxField,
    BooleanVariant.RADIO: RadioField,
    BooleanVariant.SWITCH: SwitchField,
}


def boolean_template(node: BooleanNode, path: tuple[str, ...], state, templates,
                     parent: QWidget | None = None) -> PrimitiveTemplate:
    return _VARIANTS[boolean_variant(node)](node, path, state, templates, parent)
