from __future__ import annotations

from enum import Enum
from typing import Tuple


class DayKey(str, Enum):
    """The seven canonical weekday keys, in week order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value: "str | DayKey") -> "DayKey":
        if isinstance(value, DayKey):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown day key: {value!r}") from None


DAY_KEYS: Tuple[str, ...] = tuple(d.value for d in DayKey)


def is_day_key(value) -> bool:
    return isinstance(value, str) and value in DAY_KEYS
