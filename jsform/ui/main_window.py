from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema.exceptions import SchemaError as InvalidSchema
from PySide6.QtCore import Qt, QByteArray
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QSplitter, QPlainTextEdit, QToolBar, QFileDialog, QMessageBox,
)

from jsform.core import FormError, JsformError
from jsform.core.config import Config
from jsform.example_schema import PERSON_SCHEMA, PERSON_DATA

from .form_widget import SchemaForm
from .readonly_switch import ReadonlySwitch

logger = logging.getLogger(__name__)


def _read_json_file(path: str | Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


class MainWindow(QMainWindow):
    """ Demo shell: a schema form on the left, the last submission result on the right. """

    def __init__(self, cfg: Config) -> None:
        super().__init__()
        self.setWindowTitle("Schema Form")
        self.resize(1000, 760)
        self.config = cfg

        self.schema: dict = PERSON_SCHEMA
        self.initial_data: Any = PERSON_DATA
        self.form: SchemaForm | None = None

        self._splitter = QSplitter(Qt.Horizontal, self)
        self.result_view = QPlainTextEdit(self)
        self.result_view.setReadOnly(True)
        self.result_view.setPlaceholderText("Submit the form to see the result here.")
        self._splitter.addWidget(self.result_view)
        self.setCentralWidget(self._splitter)

        # Toolbar actions
        tb = QToolBar("Main")
        tb.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, tb)

        act_open_schema = QAction("Open Schema…", self)
        act_open_schema.triggered.connect(self._on_open_schema)
        tb.addAction(act_open_schema)
        act_load_data = QAction("Load Data…", self)
        act_load_data.triggered.connect(self._on_load_data)
        tb.addAction(act_load_data)
        act_reset = QAction("Reset", self)
        act_reset.triggered.connect(lambda: self.load_form(self.schema, self.initial_data))
        tb.addAction(act_reset)
        tb.addSeparator()
        self.readonly_switch = ReadonlySwitch(parent=self)
        tb.addWidget(self.readonly_switch)

        self._restore_from_config()

    # --- config ---
    def _restore_from_config(self) -> None:
        if self.config.last_schema_path and Path(self.config.last_schema_path).exists():
            try:
                self.schema = _read_json_file(self.config.last_schema_path)
                self.initial_data = None
                if self.config.last_data_path and Path(self.config.last_data_path).exists():
                    self.initial_data = _read_json_file(self.config.last_data_path)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Couldn't reopen %s: %s", self.config.last_schema_path, e)
                self.schema, self.initial_data = PERSON_SCHEMA, PERSON_DATA
        if not self.load_form(self.schema, self.initial_data, readonly=self.config.readonly):
            self.schema, self.initial_data = PERSON_SCHEMA, PERSON_DATA
            self.load_form(self.schema, self.initial_data, readonly=self.config.readonly)

        geometry = self.config.ui.geometry.get("main")
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode("ascii")))
        sizes = self.config.ui.splitterSizes.get("main")
        if sizes:
            self._splitter.setSizes(list(sizes))

    def store_to_config(self) -> None:
        self.config.ui.geometry["main"] = bytes(self.saveGeometry().toHex()).decode("ascii")
        self.config.ui.splitterSizes["main"] = self._splitter.sizes()
        if self.form is not None:
            self.config.readonly = self.form.state.readonly()

    # --- form ---
    def load_form(self, schema: dict, initial_data: Any = None, readonly: bool = False) -> bool:
        """ Replace the current form. Returns False (and tells the user) if the schema can't be used. """
        try:
            form = SchemaForm(schema, initial_data, on_submit=self._show_data, on_error=self._show_errors,
                              readonly=readonly)
        except (JsformError, InvalidSchema) as e:
            logger.warning("Rejected schema: %s", e)
            QMessageBox.warning(self, "Unsupported schema", str(e))
            return False

        if self.form is not None:
            self.form.setParent(None)
            self.form.deleteLater()
        self.form = form
        self._splitter.insertWidget(0, form)
        self.readonly_switch.bind(form.state)
        self.result_view.clear()
        title = schema.get("title") if isinstance(schema, dict) else None
        self.setWindowTitle(f"Schema Form - {title}" if title else "Schema Form")
        return True

    def _show_data(self, data: Any) -> None:
        self.result_view.setPlainText(json.dumps(data, indent=2, ensure_ascii=False))

    def _show_errors(self, errors: list[FormError], data: Any) -> None:
        lines = [f"{'/'.join(e.path) or '(root)'}: {e.message}" for e in errors]
        self.result_view.setPlainText(f"{len(errors)} error(s):\n\n" + "\n".join(lines))

    # --- slots ---
    def _on_open_schema(self) -> None:
        start_dir = str(Path(self.config.last_schema_path).parent) if self.config.last_schema_path else ""
        fname, _ = QFileDialog.getOpenFileName(self, "Open Schema", start_dir, "JSON Schema (*.json);;All Files (*)")
        if not fname:
            return
        try:
            schema = _read_json_file(fname)
        except (OSError, json.JSONDecodeError) as e:
            QMessageBox.warning(self, "Open Schema", f"Couldn't read {fname}:\n{e}")
            return
        if self.load_form(schema, None, readonly=self.readonly_switch.isChecked()):
            self.schema, self.initial_data = schema, None
            self.config.last_schema_path = fname
            self.config.last_data_path = ""

    def _on_load_data(self) -> None:
        start_dir = str(Path(self.config.last_data_path).parent) if self.config.last_data_path else ""
        fname, _ = QFileDialog.getOpenFileName(self, "Load Data", start_dir, "JSON (*.json);;All Files (*)")
        if not fname:
            return
        try:
            data = _read_json_file(fname)
        except (OSError, json.JSONDecodeError) as e:
            QMessageBox.warning(self, "Load Data", f"Couldn't read {fname}:\n{e}")
            return
        if self.load_form(self.schema, data, readonly=self.readonly_switch.isChecked()):
            self.initial_data = data
            self.config.last_data_path = fname

    def closeEvent(self, event, /):
        self.store_to_config()
        super().closeEvent(event)
