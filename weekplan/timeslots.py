from __future__ import annotations

import re
from typing import List, Tuple


TIME_PATTERN = re.compile(r"^([0-1][0-9]|2[0-3]):([0-5][0-9])$")

MINUTES_PER_DAY = 24 * 60


def is_valid_time_format(value) -> bool:
    if not value or not isinstance(value, str):
        return False
    return TIME_PATTERN.match(value) is not None


def to_minutes(hm: str) -> int:
    # Lenient H:M split; "24:00" is accepted as the end-of-day boundary
    try:
        h, m = [int(x) for x in hm.split(":")]
    except (AttributeError, ValueError):
        raise ValueError(f"Not a HH:MM time: {hm!r}") from None
    return h * 60 + m


def from_minutes(minutes: int) -> str:
    h, m = divmod(int(minutes), 60)
    return f"{h:02d}:{m:02d}"


def time_options(step: int = 15) -> List[str]:
    """Selectable boundaries from 00:00 to 24:00 inclusive in ``step`` minutes."""
    if step <= 0 or MINUTES_PER_DAY % step != 0:
        raise ValueError(f"Slot step must divide a day evenly, got {step}")
    return [from_minutes(m) for m in range(0, MINUTES_PER_DAY + 1, step)]


def slot_duration(start: str, end: str) -> int:
    """Minutes between two boundaries. Negative when the slot is inverted."""
    return to_minutes(end) - to_minutes(start)


def format_duration(minutes: int) -> str:
    if minutes <= 0:
        return "0min"
    hours, remaining = divmod(int(minutes), 60)
    if hours == 0:
        return f"{remaining}min"
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"


def format_slot(start: str, end: str) -> str:
    return f"{start}-{end}"


def parse_slot(text: str) -> Tuple[str, str]:
    parts = str(text).split("-")
    if len(parts) != 2:
        raise ValueError(f"Slot must look like HH:MM-HH:MM, got {text!r}")
    return parts[0].strip(), parts[1].strip()
