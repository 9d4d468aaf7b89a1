from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from .data_io import slots_frame
from .days import DAY_KEYS
from .timeslots import format_duration, is_valid_time_format, to_minutes


MISSING_DATA = "Le planning ne contient pas de données d'horaires"
NO_VALID_SLOT = "Le planning doit contenir au moins un créneau horaire valide"
INVALID_NOTES = "Les notes quotidiennes ne sont pas un objet valide"


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


def _ordered_days(mapping: Mapping) -> List:
    # Canonical week order first, then anything else in insertion order
    known = [day for day in DAY_KEYS if day in mapping]
    extra = [day for day in mapping if day not in DAY_KEYS]
    return known + extra


def _is_pair(slot) -> bool:
    return isinstance(slot, (list, tuple)) and len(slot) == 2


def validate_weekly_schedule(
    schedule_data: Optional[Mapping[str, Any]],
    daily_notes: Optional[Mapping[str, Any]] = None,
) -> ValidationResult:
    result = ValidationResult()

    if schedule_data is None:
        result.add(MISSING_DATA)
        return result
    if not isinstance(schedule_data, Mapping):
        result.add(MISSING_DATA)
        return result

    valid_slots = 0
    for day in _ordered_days(schedule_data):
        if day not in DAY_KEYS:
            result.add(f"Le jour {day} n'est pas un jour valide de la semaine")
            continue
        day_slots = schedule_data[day]
        if not isinstance(day_slots, (list, tuple)):
            result.add(f"Les créneaux pour {day} ne sont pas un tableau valide")
            continue

        for index, slot in enumerate(day_slots):
            n = index + 1
            if not _is_pair(slot):
                result.add(f"Le créneau {n} de {day} n'est pas un tableau valide de deux éléments")
                continue

            start, end = slot
            well_formed = True
            if not is_valid_time_format(start):
                result.add(
                    f'L\'heure de début "{start}" du créneau {n} de {day} '
                    f"n'est pas au format valide (HH:MM)"
                )
                well_formed = False
            if not is_valid_time_format(end):
                result.add(
                    f'L\'heure de fin "{end}" du créneau {n} de {day} '
                    f"n'est pas au format valide (HH:MM)"
                )
                well_formed = False
            if not well_formed:
                continue

            if to_minutes(start) >= to_minutes(end):
                result.add(
                    f"Pour le créneau {n} de {day}, l'heure de début \"{start}\" "
                    f"doit être antérieure à l'heure de fin \"{end}\""
                )
                continue

            valid_slots += 1

    if valid_slots == 0:
        result.add(NO_VALID_SLOT)

    if daily_notes is not None and not isinstance(daily_notes, Mapping):
        result.add(INVALID_NOTES)
    elif daily_notes:
        for day in _ordered_days(daily_notes):
            note = daily_notes[day]
            if not isinstance(note, str) or not note.strip():
                result.add(f"La note pour {day} ne peut pas être vide")

    return result


def find_overlaps(schedule_data: Mapping[str, Any]) -> List[Tuple[str, int, int]]:
    """
    Report overlapping, individually valid slots within each day.

    Overlaps are accepted by ``validate_weekly_schedule``; this is only a
    diagnostic for callers that want to warn about them.
    """
    overlaps: List[Tuple[str, int, int]] = []
    for day in DAY_KEYS:
        day_slots = (schedule_data or {}).get(day)
        if not isinstance(day_slots, (list, tuple)):
            continue
        spans = []
        for index, slot in enumerate(day_slots):
            if not _is_pair(slot) or not all(is_valid_time_format(t) for t in slot):
                continue
            start, end = to_minutes(slot[0]), to_minutes(slot[1])
            if start < end:
                spans.append((index, start, end))
        for i, (idx_a, start_a, end_a) in enumerate(spans):
            for idx_b, start_b, end_b in spans[i + 1:]:
                if start_a < end_b and start_b < end_a:
                    overlaps.append((day, idx_a, idx_b))
    return overlaps


def summarize_schedule(payload: Mapping[str, Any]) -> str:
    frame = slots_frame(payload)
    if frame.empty:
        return "No time slots."

    per_day = frame.groupby("day", sort=False)["minutes"].agg(["count", "sum"])
    per_day = per_day.reindex([d for d in DAY_KEYS if d in per_day.index])
    per_day.columns = ["slots", "minutes"]
    per_day["worked"] = per_day["minutes"].map(format_duration)

    total = int(frame["minutes"].sum())
    lines = ["Slots per day:"]
    lines.append(per_day.to_string())
    lines.append("")
    lines.append(f"Total (week): {format_duration(total)} ({total} min)")
    daily_notes = payload.get("dailyNotes")
    notes = {}
    if isinstance(daily_notes, Mapping):
        notes = {d: n for d, n in daily_notes.items() if n}
    if notes:
        lines.append("")
        lines.append("Daily notes:")
        lines.append(pd.Series(notes, dtype="object").to_string())
    return "\n".join(lines)


def print_validation_report(result: ValidationResult) -> None:
    """Print a verdict in a readable format."""
    print("\n" + "=" * 70)
    print("VALIDATION REPORT")
    print("=" * 70)

    if result.is_valid:
        print("✓ Status: VALID")
    else:
        print("✗ Status: INVALID")

    if result.errors:
        print(f"\nErrors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  ✗ {error}")

    print("=" * 70)
