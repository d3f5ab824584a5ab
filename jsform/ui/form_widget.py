from __future__ import annotations

import copy
import logging
from typing import Any, Callable

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QScrollArea

from jsform.core import (
    FormError, FormState, ValidationResult, compile_schema, generate_initial_data, parse_schema, submit,
)

from .render import TemplateSet, render_node
from .templates import DEFAULT_TEMPLATES, detach_all

logger = logging.getLogger(__name__)


class SchemaForm(QWidget):
    """ A form built at runtime from a JSON schema.

    The raw schema is parsed into nodes for rendering and compiled (minus UI hints) for validation.
    The data tree lives in ``self.state``; templates read from it and write into it. Submitting
    validates the whole tree once and reports through the callbacks and signals.

    Signals
    -------
    submitted(object): the data tree, after a successful validation.
    failed(object, object): the list of FormError and the data tree, after a failed validation.
    """
    submitted = Signal(object)
    failed = Signal(object, object)

    def __init__(self, schema: dict, initial_data: Any = None, templates: TemplateSet = DEFAULT_TEMPLATES,
                 on_submit: Callable[[Any], None] | None = None,
                 on_error: Callable[[list[FormError], Any], None] | None = None,
                 readonly: bool = False, parent: QWidget | None = None):
        super().__init__(parent)
        self.raw_schema = schema
        self.node = parse_schema(schema)
        self.validate = compile_schema(schema)
        self.templates = templates
        self._on_submit = on_submit
        self._on_error = on_error

        if initial_data is None:
            data = generate_initial_data(self.node)
        else:
            data = copy.deepcopy(initial_data)
        self.state = FormState(self.node, data, readonly=readonly, parent=self)

        # ---------- Body ----------
        self._scroll = QScrollArea(self)
        self._scroll.setWidgetResizable(True)
        self._scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.root_widget: QWidget | None = None

        # ---------- Footer ----------
        self.btn_submit = QPushButton("Submit", self)
        self.btn_submit.clicked.connect(self.submit)
        footer = QHBoxLayout()
        footer.addStretch(1)
        footer.addWidget(self.btn_submit)

        root = QVBoxLayout(self)
        root.addWidget(self._scroll, 1)
        root.addLayout(footer)
        self.setLayout(root)

        self.state.readonlyChanged.connect(self._on_readonly_changed)
        self._render()

    # --- rendering ---
    def _render(self) -> None:
        """ (Re)build the whole template tree from the root node and the empty path. """
        old = self.root_widget
        if old is not None:
            detach_all(old)

        container = QWidget()
        layout = QVBoxLayout(container)
        self.root_widget = render_node(self.node, (), self.state, self.templates, container)
        layout.addWidget(self.root_widget)
        layout.addStretch(1)
        self._scroll.setWidget(container)  # deletes the previous container

        self.btn_submit.setVisible(not self.state.readonly())

    def _on_readonly_changed(self, on: bool) -> None:
        logger.debug("Readonly %s, rebuilding form", on)
        self._render()

    # --- public API ---
    def data(self) -> Any:
        return self.state.data()

    def set_readonly(self, on: bool) -> None:
        self.state.set_readonly(on)

    def submit(self) -> ValidationResult:
        return submit(self.state, self.validate, self._submitted, self._failed)

    def _submitted(self, data: Any) -> None:
        if self._on_submit:
            self._on_submit(data)
        self.submitted.emit(data)

    def _failed(self, errors: list[FormError], data: Any) -> None:
        if self._on_error:
            self._on_error(errors, data)
        self.failed.emit(errors, data)
