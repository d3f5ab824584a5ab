from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QFrame

from ..render import render_node
from .base import FieldTemplate

NO_DATA_TEXT = "No data available"


class ObjectField(FieldTemplate):
    """ Renders every property in declaration order, each bound to ``path + (name,)``.

    Readonly mode shows a "No data available" placeholder for an object without properties,
    editable mode never does.
    """

    def __init__(self, node, path, state, templates, parent: QWidget | None = None):
        super().__init__(node, path, state, templates, parent)
        self.children_by_name: dict[str, QWidget] = {}

        self._add(self._title_label())
        self._add(self._description_label())
        self._add(self.errors)

        body = QFrame(self)
        if path:
            # Nested objects are indented under their title
            body.setFrameShape(QFrame.NoFrame)
            body.setStyleSheet("QFrame#objectBody { border-left: 2px solid #d0d0d0; }")
            body.setObjectName("objectBody")
        self.body_layout = QVBoxLayout(body)
        self.body_layout.setContentsMargins(12 if path else 0, 0, 0, 0)
        self.root_layout.addWidget(body)

        for name, child in node.properties.items():
            widget = render_node(child, (*path, name), state, templates, body)
            self.body_layout.addWidget(widget)
            self.children_by_name[name] = widget

        self.placeholder = None
        if self.readonly and not node.properties:
            self.placeholder = QLabel(NO_DATA_TEXT, body)
            self.placeholder.setStyleSheet("color: gray;")
            self.body_layout.addWidget(self.placeholder)

        self._on_errors_changed()

    def refresh(self) -> None:
        # Children follow the store themselves.
        pass
