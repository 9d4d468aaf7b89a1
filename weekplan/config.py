from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .timeslots import MINUTES_PER_DAY, is_valid_time_format, to_minutes


DEFAULT_DB_URL = "sqlite:///weekplan.db"


@dataclass
class DefaultSlot:
    start: str = "09:00"
    end: str = "17:00"

    @property
    def duration_minutes(self) -> int:
        return to_minutes(self.end) - to_minutes(self.start)


@dataclass
class EditorConfig:
    default_slot: DefaultSlot = field(default_factory=DefaultSlot)
    slot_step_minutes: int = 15


@dataclass
class WeekplanConfig:
    timezone: str = "Europe/Paris"
    db_url: str = DEFAULT_DB_URL
    editor: EditorConfig = field(default_factory=EditorConfig)


def _read_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def _validate(cfg: WeekplanConfig) -> None:
    slot = cfg.editor.default_slot
    for value in (slot.start, slot.end):
        if not is_valid_time_format(value):
            raise ValueError(f"Invalid default slot boundary: {value!r}")
    if slot.duration_minutes <= 0:
        raise ValueError(f"Default slot must start before it ends: {slot.start}-{slot.end}")
    step = cfg.editor.slot_step_minutes
    if step <= 0 or MINUTES_PER_DAY % step != 0:
        raise ValueError(f"slot_step_minutes must divide a day evenly, got {step}")


def config_from_dict(data: Dict[str, Any]) -> WeekplanConfig:
    editor_raw = data.get("editor") or {}
    slot_raw = editor_raw.get("default_slot") or {}
    cfg = WeekplanConfig(
        timezone=str(data.get("timezone", "Europe/Paris")),
        db_url=str(data.get("db_url", DEFAULT_DB_URL)),
        editor=EditorConfig(
            default_slot=DefaultSlot(
                start=str(slot_raw.get("start", "09:00")),
                end=str(slot_raw.get("end", "17:00")),
            ),
            slot_step_minutes=int(editor_raw.get("slot_step_minutes", 15)),
        ),
    )
    _validate(cfg)
    return cfg


def load_config(path: str | Path | None = None) -> WeekplanConfig:
    """Load YAML (or ``.json``) configuration. ``None`` gives the defaults."""
    if path is None:
        return config_from_dict({})
    return config_from_dict(_read_raw(Path(path)))
