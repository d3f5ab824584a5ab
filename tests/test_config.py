import json

import pytest
from pydantic import ValidationError
from PySide6.QtCore import QSettings

from jsform.core import config as config_mod
from jsform.core.config import Config, UIState, load_config, save_config


@pytest.fixture()
def ini_settings(tmp_path, monkeypatch):
    """ Point the config module at a throwaway INI file. """
    path = str(tmp_path / "jsform.ini")
    monkeypatch.setattr(config_mod, "_s", lambda: QSettings(path, QSettings.IniFormat))
    return path


def test_defaults_when_nothing_saved(ini_settings):
    cfg = load_config()
    assert cfg == Config()


def test_round_trip(ini_settings):
    cfg = Config(
        ui=UIState(geometry={"main": "abcd"}, splitterSizes={"main": [600, 400]}),
        last_schema_path="/tmp/schema.json",
        last_data_path="/tmp/data.json",
        readonly=True,
        log_level="debug",
    )
    save_config(cfg)
    loaded = load_config()
    assert loaded == cfg
    assert loaded.log_level == "DEBUG"


def test_unknown_level_rejected():
    with pytest.raises(ValidationError):
        Config(log_level="LOUD")


def test_unknown_level_in_settings_falls_back(ini_settings):
    s = QSettings(ini_settings, QSettings.IniFormat)
    s.setValue("logging/level", "LOUD")
    s.sync()
    del s
    assert load_config().log_level == "INFO"


def test_corrupt_json_setting_is_ignored(ini_settings):
    s = QSettings(ini_settings, QSettings.IniFormat)
    s.setValue("ui/geometry", "{not json")
    s.sync()
    del s
    assert load_config().ui.geometry == {}


def test_settings_keys_are_grouped(ini_settings):
    save_config(Config(last_schema_path="/tmp/s.json", readonly=True))
    s = QSettings(ini_settings, QSettings.IniFormat)
    assert s.value("files/schema") == "/tmp/s.json"
    assert s.value("form/readonly") in (True, "true")
    assert json.loads(s.value("ui/geometry")) == {}


def test_non_mapping_json_is_ignored(ini_settings):
    s = QSettings(ini_settings, QSettings.IniFormat)
    s.setValue("ui/splitterSizes", "[1, 2]")
    s.sync()
    del s
    assert load_config().ui.splitterSizes == {}
