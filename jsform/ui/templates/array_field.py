from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QToolButton

from jsform.core import Direction, generate_initial_data

from ..render import render_node
from .base import FieldTemplate, detach_all, is_prefix

NO_ITEMS_TEXT = "No items available"


class ArrayRow(QWidget):
    """ One array element: remove/up/down buttons (editable mode only) next to the element's template. """

    def __init__(self, owner: "ArrayField", index: int, count: int, parent: QWidget | None = None):
        super().__init__(parent)
        self.index = index
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        if not owner.readonly:
            self.btn_remove = QToolButton(self)
            self.btn_remove.setText("×")
            self.btn_remove.setToolTip("Remove item")
            self.btn_remove.clicked.connect(lambda: owner.remove_item(index))

            self.btn_up = QToolButton(self)
            self.btn_up.setText("▲")
            self.btn_up.setToolTip("Move up")
            self.btn_up.setEnabled(index > 0)
            self.btn_up.clicked.connect(lambda: owner.move_item(index, Direction.UP))

            self.btn_down = QToolButton(self)
            self.btn_down.setText("▼")
            self.btn_down.setToolTip("Move down")
            self.btn_down.setEnabled(index < count - 1)
            self.btn_down.clicked.connect(lambda: owner.move_item(index, Direction.DOWN))

            for btn in (self.btn_remove, self.btn_up, self.btn_down):
                row.addWidget(btn)

        self.item = render_node(owner.node.items, (*owner.path, str(index)), owner.state, owner.templates, self)
        row.addWidget(self.item, 1)


class ArrayField(FieldTemplate):
    """ One row per element currently in the store, rebuilt whenever the length changes.

    New elements are seeded from the ``items`` schema by the initial data generator. Readonly mode shows
    "No items available" for an empty array, editable mode just shows the add button.
    """

    def __init__(self, node, path, state, templates, parent: QWidget | None = None):
        super().__init__(node, path, state, templates, parent)
        self.rows: list[ArrayRow] = []
        self.placeholder = None
        self._built = False

        self._add(self._title_label())
        self._add(self._description_label())

        self.rows_widget = QWidget(self)
        self.rows_layout = QVBoxLayout(self.rows_widget)
        self.rows_layout.setContentsMargins(12, 0, 0, 0)
        self.root_layout.addWidget(self.rows_widget)

        self.btn_add = None
        if not self.readonly:
            self.btn_add = QPushButton("Add Item", self)
            self.btn_add.setEnabled(node.items is not None)
            self.btn_add.clicked.connect(self.add_item)
            self.root_layout.addWidget(self.btn_add)

        self._add(self.errors)
        self.refresh()
        self._on_errors_changed()

    # --- store-backed actions ---
    def add_item(self) -> None:
        items = self.node.items
        self.state.add_item(self.path, lambda: generate_initial_data(items) if items is not None else None)

    def remove_item(self, index: int) -> None:
        self.state.remove_item(self.path, index)

    def move_item(self, index: int, direction: Direction) -> None:
        self.state.move_item(self.path, index, direction)

    # --- rendering ---
    def _on_data_changed(self, changed: tuple[str, ...]) -> None:
        # Writes below the array can change its length too, e.g. set(["tags", "3"], x) pads it.
        if is_prefix(changed, self.path) or is_prefix(self.path, changed):
            self.refresh()

    def _length(self) -> int:
        items = self.value()
        return len(items) if isinstance(items, list) else 0

    def refresh(self) -> None:
        count = self._length() if self.node.items is not None else 0
        if self._built and count == len(self.rows):
            return  # same length: the rows refresh their own values
        self._rebuild(count)

    def _rebuild(self, count: int) -> None:
        for row in self.rows:
            detach_all(row)
            self.rows_layout.removeWidget(row)
            # deleteLater: the click that triggered this may still be running inside the row
            row.hide()
            row.deleteLater()
        self.rows = []
        if self.placeholder is not None:
            self.rows_layout.removeWidget(self.placeholder)
            self.placeholder.deleteLater()
            self.placeholder = None

        for index in range(count):
            row = ArrayRow(self, index, count, self.rows_widget)
            self.rows_layout.addWidget(row)
            self.rows.append(row)

        if self.readonly and count == 0:
            self.placeholder = QLabel(NO_ITEMS_TEXT, self.rows_widget)
            self.placeholder.setStyleSheet("color: gray;")
            self.rows_layout.addWidget(self.placeholder)
        self._built = True
