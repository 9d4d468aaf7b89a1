"""In-memory editing state for one employee's weekly schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .config import EditorConfig
from .days import DAY_KEYS, DayKey, is_day_key
from .timeslots import format_duration as _format_duration
from .timeslots import format_slot, parse_slot, slot_duration, time_options


@dataclass
class TimeSlot:
    start: str
    end: str

    def as_pair(self) -> List[str]:
        return [self.start, self.end]


@dataclass
class DaySchedule:
    slots: List[TimeSlot] = field(default_factory=list)
    note: str = ""


@dataclass
class WeeklySchedule:
    days: Dict[DayKey, DaySchedule] = field(
        default_factory=lambda: {day: DaySchedule() for day in DayKey}
    )
    notes: str = ""

    def __getitem__(self, day: "str | DayKey") -> DaySchedule:
        return self.days[DayKey.parse(day)]


class ScheduleEditor:
    """
    Mutable weekly schedule plus its derived durations.

    Slot updates are not validated here; chronological and format checks
    run in ``weekplan.validator`` right before submission.
    """

    def __init__(self, cfg: EditorConfig | None = None):
        self.cfg = cfg or EditorConfig()
        self.schedule = WeeklySchedule()

    # Mutation

    def reset(self) -> None:
        self.schedule = WeeklySchedule()

    def add_slot(self, day: "str | DayKey") -> TimeSlot:
        default = self.cfg.default_slot
        slot = TimeSlot(default.start, default.end)
        self.schedule[day].slots.append(slot)
        return slot

    def remove_slot(self, day: "str | DayKey", index: int) -> None:
        slots = self.schedule[day].slots
        if 0 <= index < len(slots):
            del slots[index]

    def set_slot_boundary(self, day: "str | DayKey", index: int, which: str, value: str) -> None:
        if which not in ("start", "end"):
            raise ValueError(f"Slot boundary must be 'start' or 'end', got {which!r}")
        slots = self.schedule[day].slots
        if not 0 <= index < len(slots):
            return
        setattr(slots[index], which, value)

    def set_note(self, day: "str | DayKey", text: str) -> None:
        self.schedule[day].note = text

    def set_week_notes(self, text: str) -> None:
        self.schedule.notes = text

    def slots(self, day: "str | DayKey") -> List[TimeSlot]:
        return list(self.schedule[day].slots)

    # Option lists offered for a slot's boundaries

    def start_options(self, day: "str | DayKey", index: int) -> List[str]:
        slot = self.schedule[day].slots[index]
        options = time_options(self.cfg.slot_step_minutes)
        return [t for t in options if _fits_before(t, slot.end)]

    def end_options(self, day: "str | DayKey", index: int) -> List[str]:
        slot = self.schedule[day].slots[index]
        options = time_options(self.cfg.slot_step_minutes)
        return [t for t in options if _fits_before(slot.start, t)]

    # Durations

    @staticmethod
    def duration(slot: TimeSlot) -> int:
        # Unparseable boundaries count as 0; the validator reports them
        try:
            return slot_duration(slot.start, slot.end)
        except ValueError:
            return 0

    def total_duration(self, day: "str | DayKey") -> int:
        return sum(self.duration(slot) for slot in self.schedule[day].slots)

    def total_weekly_duration(self) -> int:
        return sum(self.total_duration(day) for day in DayKey)

    @staticmethod
    def format_duration(minutes: int) -> str:
        return _format_duration(minutes)

    # Serialization

    def serialize(self) -> Dict[str, Any]:
        schedule_data: Dict[str, List[str]] = {}
        daily_notes: Dict[str, str] = {}
        for day in DayKey:
            day_schedule = self.schedule.days[day]
            if day_schedule.slots:
                schedule_data[day.value] = [format_slot(s.start, s.end) for s in day_schedule.slots]
            daily_notes[day.value] = (day_schedule.note or "").strip()
        return {
            "scheduleData": schedule_data,
            "dailyNotes": daily_notes,
            "notes": (self.schedule.notes or "").strip(),
            "totalWeeklyMinutes": self.total_weekly_duration(),
        }

    def to_validation_input(self) -> Dict[str, Any]:
        """Deserialized ``[start, end]`` form consumed by the validator."""
        schedule_data = {
            day.value: [slot.as_pair() for slot in self.schedule.days[day].slots]
            for day in DayKey
        }
        # Notes the user never filled in are omitted rather than blank
        daily_notes = {
            day.value: self.schedule.days[day].note
            for day in DayKey
            if (self.schedule.days[day].note or "").strip()
        }
        return {"scheduleData": schedule_data, "dailyNotes": daily_notes}

    def build_payload(
        self,
        employee_id: str,
        year: int,
        week_number: int,
        week_dates: Mapping[str, str],
        record_id: Optional[str] = None,
        status: str = "approved",
    ) -> Dict[str, Any]:
        serialized = self.serialize()
        payload: Dict[str, Any] = {
            "employeeId": employee_id,
            "year": int(year),
            "weekNumber": int(week_number),
            "status": status,
            "notes": serialized["notes"],
            "scheduleData": serialized["scheduleData"],
            "dailyNotes": serialized["dailyNotes"],
            "dailyDates": {day: week_dates[day] for day in DAY_KEYS if day in week_dates},
            "totalWeeklyMinutes": serialized["totalWeeklyMinutes"],
        }
        if record_id is not None:
            payload["_id"] = record_id
        return payload

    @classmethod
    def from_record(cls, record: Mapping[str, Any], cfg: EditorConfig | None = None) -> "ScheduleEditor":
        """Rebuild editor state from a persisted or proposed wire record."""
        editor = cls(cfg)
        schedule_data = record.get("scheduleData")
        if not isinstance(schedule_data, Mapping):
            schedule_data = {}
        for day, slots in schedule_data.items():
            if not is_day_key(day) or not isinstance(slots, list):
                continue
            for text in slots:
                try:
                    start, end = parse_slot(text)
                except ValueError:
                    # Kept as-is so the validator reports it instead of losing it
                    start, end = str(text), ""
                editor.schedule[day].slots.append(TimeSlot(start, end))
        daily_notes = record.get("dailyNotes")
        if isinstance(daily_notes, Mapping):
            for day, note in daily_notes.items():
                if is_day_key(day) and isinstance(note, str):
                    editor.schedule[day].note = note
        editor.schedule.notes = record.get("notes") or ""
        return editor


def _fits_before(earlier: str, later: str) -> bool:
    try:
        return slot_duration(earlier, later) > 0
    except ValueError:
        return True
