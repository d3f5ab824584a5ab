from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel

from jsform.core import FormState, SchemaNode

from ..render import TemplateSet

EMPTY_TEXT = "N/A"


def path_key(path: tuple[str, ...]) -> str:
    """ Object name used for the template bound to a path, "root" for the empty path. """
    return ".".join(path) if path else "root"


def is_prefix(prefix: tuple[str, ...], path: tuple[str, ...]) -> bool:
    return path[:len(prefix)] == prefix


class ErrorList(QLabel):
    """ Shows the validation errors stored at one exact path, one per line. Hidden when there are none. """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWordWrap(True)
        self.setStyleSheet("color: #c0392b;")
        self._messages: list[str] = []
        self.hide()

    def show_errors(self, errors) -> None:
        self._messages = [e.message for e in errors]
        self.setText("\n".join(self._messages))
        self.setVisible(bool(self._messages))

    def messages(self) -> list[str]:
        return list(self._messages)


class FieldTemplate(QWidget):
    """ Base for every template: keeps the node, path and store handle and wires store signals.

    Subclasses build their widgets in ``__init__`` (checking ``self.readonly``) and implement
    ``refresh()``, which pulls the current value for the path from the store.
    """

    def __init__(self, node: SchemaNode, path: tuple[str, ...], state: FormState, templates: TemplateSet,
                 parent: QWidget | None = None):
        super().__init__(parent)
        self.node = node
        self.path = path
        self.state = state
        self.templates = templates
        self.readonly = state.readonly()
        self.setObjectName(path_key(path))

        self.root_layout = QVBoxLayout(self)
        self.root_layout.setContentsMargins(0, 4, 0, 4)
        self.root_layout.setSpacing(2)

        self.errors = ErrorList(self)

        self.state.dataChanged.connect(self._on_data_changed)
        self.state.errorsChanged.connect(self._on_errors_changed)
        self._attached = True

    # --- building helpers ---
    def _title_label(self, suffix: str = "") -> QLabel | None:
        if not self.node.title:
            return None
        label = QLabel(self.node.title + suffix, self)
        label.setStyleSheet("font-weight: 600;")
        return label

    def _description_label(self) -> QLabel | None:
        if not self.node.description:
            return None
        label = QLabel(self.node.description, self)
        label.setWordWrap(True)
        label.setStyleSheet("color: gray; font-size: 11px;")
        return label

    def _add(self, widget: QWidget | None) -> None:
        if widget is not None:
            self.root_layout.addWidget(widget)

    def _add_readonly_value(self) -> None:
        """ The common readonly layout: "Title: value" on one line, then the description. """
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        title = self._title_label(":")
        if title is not None:
            row.addWidget(title)
        self.value_label = QLabel(self)
        self.value_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        row.addWidget(self.value_label, 1)
        self.root_layout.addLayout(row)
        self._add(self._description_label())
        self._add(self.errors)

    # --- store access ---
    def value(self, default: Any = None) -> Any:
        return self.state.get(self.path, default)

    def write(self, value: Any) -> None:
        """ Write back to the store. None means "unset" and removes the value. """
        if value is None:
            self.state.clear(self.path)
        else:
            self.state.set(self.path, value)

    # --- store signals ---
    def _on_data_changed(self, changed: tuple[str, ...]) -> None:
        # A write at or above our path may have replaced our value.
        if is_prefix(changed, self.path):
            self.refresh()

    def _on_errors_changed(self) -> None:
        self.errors.show_errors(self.state.errors_at(self.path))

    def refresh(self) -> None:
        """ Pull the current value for ``self.path`` into the widgets. Every template overrides this. """
        raise NotImplementedError

    def detach(self) -> None:
        """ Stop listening to the store. """
        if self._attached:
            self.state.dataChanged.disconnect(self._on_data_changed)
            self.state.errorsChanged.disconnect(self._on_errors_changed)
            self._attached = False


def detach_all(widget: QWidget) -> None:
    """ Detach every template in a widget subtree, before the subtree is thrown away. """
    templates = widget.findChildren(FieldTemplate)
    if isinstance(widget, FieldTemplate):
        templates.append(widget)
    for template in templates:
        template.detach()


class PrimitiveTemplate(FieldTemplate):
    """ Shared flow for leaf templates: readonly shows "Title: value", editable calls ``_build_editor``. """

    def __init__(self, node, path, state, templates, parent=None):
        super().__init__(node, path, state, templates, parent)
        if self.readonly:
            self._add_readonly_value()
        else:
            self._build_editor()
        self.refresh()
        self._on_errors_changed()

    def _build_editor(self) -> None:
        """ Build the editable widgets. Leaf templates must override this. """
        raise NotImplementedError

    def display_text(self, value: Any) -> str:
        return EMPTY_TEXT if value is None else str(value)

    def refresh(self) -> None:
        value = self.value()
        if self.readonly:
            self.value_label.setText(self.display_text(value))
        else:
            self.show_value(value)

    def show_value(self, value: Any) -> None:
        # Leaf templates must override: put ``value`` into the editor without writing back.
        raise NotImplementedError
