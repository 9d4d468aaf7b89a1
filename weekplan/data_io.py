from __future__ import annotations

import json
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Mapping

import pandas as pd

from .days import DAY_KEYS
from .timeslots import is_valid_time_format, slot_duration


def iso_weeks_in_year(year: int) -> int:
    # Dec 28th always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def week_monday(year: int, week_number: int) -> date:
    if not 1 <= int(week_number) <= iso_weeks_in_year(int(year)):
        raise ValueError(f"Year {year} has no ISO week {week_number}")
    return date.fromisocalendar(int(year), int(week_number), 1)


def to_iso_with_tz(dt: datetime, tz: str) -> str:
    # Represent as ISO8601 with local offset using pandas timezone handling
    s = pd.Timestamp(dt).tz_localize(tz)
    return s.isoformat()


def week_dates(year: int, week_number: int, tz: str) -> Dict[str, str]:
    """Local midnight of each day of an ISO week, keyed by day key."""
    monday = week_monday(year, week_number)
    dates = {}
    for offset, day in enumerate(DAY_KEYS):
        local_day = datetime.combine(monday + timedelta(days=offset), datetime.min.time())
        dates[day] = to_iso_with_tz(local_day, tz)
    return dates


def read_payload(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Schedule file must contain a JSON object: {path}")
    return data


def write_payload(path: str | Path, payload: Mapping[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(dict(payload), fh, ensure_ascii=False, indent=2)


def _split_slot(text) -> List:
    if not isinstance(text, str):
        return [text]
    parts = text.split("-")
    # Anything but a single separator stays unsplit so it is reported as malformed
    return parts if len(parts) == 2 else [text]


def payload_to_validation_input(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Re-expand wire ``"HH:MM-HH:MM"`` strings into ``[start, end]`` pairs.

    A ``None`` scheduleData stays ``None``. Weekdays the payload omits come
    back as empty days. On the wire an empty note means "no note", so empty
    notes are dropped instead of being reported as blanked.
    """
    raw = payload.get("scheduleData")
    if raw is None:
        schedule_data = None
    elif not isinstance(raw, Mapping):
        schedule_data = raw
    else:
        schedule_data = {day: [] for day in DAY_KEYS}
        for day, slots in raw.items():
            if isinstance(slots, list):
                schedule_data[day] = [_split_slot(s) for s in slots]
            else:
                schedule_data[day] = slots

    daily_notes = payload.get("dailyNotes")
    if isinstance(daily_notes, Mapping):
        daily_notes = {day: note for day, note in daily_notes.items() if note != ""}
    return {"scheduleData": schedule_data, "dailyNotes": daily_notes}


def slots_frame(payload: Mapping[str, Any]) -> pd.DataFrame:
    """One row per well-formed wire slot: day, slot (1-based), start, end, minutes."""
    rows = []
    schedule_data = payload.get("scheduleData")
    if not isinstance(schedule_data, Mapping):
        schedule_data = {}
    for day in DAY_KEYS:
        slots = schedule_data.get(day)
        if not isinstance(slots, list):
            continue
        for index, text in enumerate(slots):
            pair = _split_slot(text)
            if len(pair) != 2 or not all(is_valid_time_format(t) for t in pair):
                continue
            start, end = pair
            rows.append(
                {
                    "day": day,
                    "slot": index + 1,
                    "start": start,
                    "end": end,
                    "minutes": slot_duration(start, end),
                }
            )
    return pd.DataFrame(rows, columns=["day", "slot", "start", "end", "minutes"])
