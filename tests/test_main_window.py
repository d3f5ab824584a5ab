import json

import pytest
from PySide6.QtWidgets import QFileDialog, QMessageBox

from jsform.core.config import Config
from jsform.example_schema import PERSON_DATA
from jsform.ui import ReadonlySwitch
from jsform.ui.main_window import MainWindow


@pytest.fixture()
def window(qtbot):
    win = MainWindow(Config())
    qtbot.addWidget(win)
    return win


@pytest.fixture()
def warnings(monkeypatch):
    """ Capture QMessageBox.warning calls instead of blocking on a dialog. """
    seen = []
    monkeypatch.setattr(QMessageBox, "warning", staticmethod(lambda *a, **k: seen.append(a[1:])))
    return seen


def test_starts_with_example_form(window):
    assert window.form is not None
    assert window.form.data() == PERSON_DATA
    assert window.form.data() is not PERSON_DATA


def test_submit_shows_json(window):
    window.form.submit()
    assert json.loads(window.result_view.toPlainText()) == PERSON_DATA


def test_failed_submit_lists_errors(window):
    window.form.state.clear(["email"])
    window.form.submit()
    text = window.result_view.toPlainText()
    assert text.startswith("1 error(s)")
    assert "email: 'email' is a required property" in text


def test_switch_follows_form(window):
    switch = window.readonly_switch
    assert switch.text() == "Read-only false"
    switch.setChecked(True)
    assert window.form.state.readonly()
    assert switch.text() == "Read-only true"
    window.form.set_readonly(False)
    assert not switch.isChecked()


def test_switch_rebinds_on_new_form(window):
    old_state = window.form.state
    assert window.load_form({"type": "object", "properties": {"x": {"type": "string"}}})
    window.readonly_switch.setChecked(True)
    assert window.form.state.readonly()
    assert not old_state.readonly()


def test_bad_schema_is_rejected(window, warnings):
    form = window.form
    assert not window.load_form({"type": "object", "properties": {"x": {"type": "tuple"}}})
    assert window.form is form
    assert warnings and warnings[0][0] == "Unsupported schema"


def test_open_schema_from_file(window, tmp_path, monkeypatch):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"type": "object", "title": "Thing", "properties": {"n": {"type": "number"}}}))
    monkeypatch.setattr(QFileDialog, "getOpenFileName", staticmethod(lambda *a, **k: (str(path), "")))
    window._on_open_schema()
    assert window.form.data() == {}
    assert window.windowTitle() == "Schema Form - Thing"
    assert window.config.last_schema_path == str(path)


def test_load_unreadable_data(window, tmp_path, monkeypatch, warnings):
    path = tmp_path / "d.json"
    path.write_text("{oops")
    monkeypatch.setattr(QFileDialog, "getOpenFileName", staticmethod(lambda *a, **k: (str(path), "")))
    window._on_load_data()
    assert warnings and warnings[0][0] == "Load Data"
    assert window.form.data() == PERSON_DATA


def test_store_to_config(window):
    window.form.set_readonly(True)
    window.store_to_config()
    assert window.config.readonly
    assert "main" in window.config.ui.geometry
    assert len(window.config.ui.splitterSizes["main"]) == 2


def test_standalone_switch(qtbot, make_state):
    state = make_state(data={})
    switch = ReadonlySwitch(state)
    qtbot.addWidget(switch)
    state.set_readonly(True)
    assert switch.isChecked()
    assert switch.text() == "Read-only true"
