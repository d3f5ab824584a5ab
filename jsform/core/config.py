from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator
from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# QSettings scope
ORG = "jsform"
APP = "Schema Form"


class UIState(BaseModel):
    geometry: dict = Field(default_factory=dict)
    splitterSizes: dict = Field(default_factory=dict)


class Config(BaseModel):
    ui: UIState = Field(default_factory=UIState)
    last_schema_path: str = ""
    last_data_path: str = ""
    readonly: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return value


# Settings key -> (section, field, kind). Sections map to nested models, "" is the top level.
_LAYOUT: dict[str, tuple[str, str, type]] = {
    "ui/geometry": ("ui", "geometry", dict),
    "ui/splitterSizes": ("ui", "splitterSizes", dict),
    "files/schema": ("", "last_schema_path", str),
    "files/data": ("", "last_data_path", str),
    "form/readonly": ("", "readonly", bool),
    "logging/level": ("", "log_level", str),
}


def _s() -> QSettings:
    return QSettings(ORG, APP)


def _decode(key: str, raw: Any, kind: type) -> Any:
    """ Turn a stored settings value back into ``kind``. Returns None for anything unusable. """
    if kind is dict:
        if isinstance(raw, dict):
            return raw  # native backends keep the mapping
        try:
            value = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable setting %s", key)
            return None
        return value if isinstance(value, dict) else None
    if kind is bool:
        # INI and plist backends hand booleans back as strings
        return raw.lower() in ("1", "true", "yes") if isinstance(raw, str) else bool(raw)
    return str(raw)


def _encode(value: Any, kind: type) -> Any:
    return json.dumps(value, ensure_ascii=False) if kind is dict else value


def load_config() -> Config:
    s = _s()
    fields: dict[str, dict[str, Any]] = {"": {}, "ui": {}}
    for key, (section, name, kind) in _LAYOUT.items():
        if not s.contains(key):
            continue
        value = _decode(key, s.value(key), kind)
        if value is not None:
            fields[section][name] = value

    level = fields[""].get("log_level")
    if level is not None and level.upper() not in logging.getLevelNamesMapping():
        logger.warning("Unknown log level %r in settings, using INFO", level)
        del fields[""]["log_level"]

    return Config(ui=UIState(**fields["ui"]), **fields[""])


def save_config(cfg: Config) -> None:
    s = _s()
    for key, (section, name, kind) in _LAYOUT.items():
        owner = getattr(cfg, section) if section else cfg
        s.setValue(key, _encode(getattr(owner, name), kind))
    s.sync()
