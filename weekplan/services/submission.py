"""Validate-then-persist handoff of an edited weekly schedule."""

from __future__ import annotations

from numbers import Number
from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from weekplan.data_io import week_dates
from weekplan.domain.models import WeeklySchedule
from weekplan.domain.repositories import WeeklyScheduleRepository, check_week_params
from weekplan.editor import ScheduleEditor
from weekplan.validator import validate_weekly_schedule


REQUIRED_FIELDS = ("employeeId", "year", "weekNumber", "scheduleData", "dailyDates")


class ScheduleValidationError(ValueError):
    """Raised when a schedule is rejected before submission."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def check_payload(payload: Mapping[str, Any]) -> None:
    """
    Check the fields a submission payload must carry.

    Raises:
        ValueError: If a required field is missing or falsy, or
            totalWeeklyMinutes is not a number
    """
    missing = [key for key in REQUIRED_FIELDS if not payload.get(key)]
    minutes = payload.get("totalWeeklyMinutes")
    if missing or isinstance(minutes, bool) or not isinstance(minutes, Number):
        raise ValueError("Champs requis manquants")


def submit_schedule(
    session: Session,
    editor: ScheduleEditor,
    employee_id: str,
    year: int,
    week_number: int,
    tz: str,
    record_id: int | None = None,
    updated_by: str | None = None,
) -> WeeklySchedule:
    """
    Validate the editor state and persist it.

    Args:
        session: Database session
        editor: Schedule being submitted
        employee_id: Employee the schedule belongs to
        year: ISO year
        week_number: ISO week number
        tz: Timezone used to stamp each day's date
        record_id: Existing record to update instead of creating one
        updated_by: Identifier of the submitting user

    Returns:
        The persisted WeeklySchedule

    Raises:
        ScheduleValidationError: If the schedule fails validation; nothing is persisted
        DuplicateScheduleError: If creating and a schedule already exists for that week
    """
    check_week_params(year, week_number)

    candidate = editor.to_validation_input()
    result = validate_weekly_schedule(candidate["scheduleData"], candidate["dailyNotes"])
    if not result.is_valid:
        print(f"[WARN] Schedule for {employee_id} {year}-W{week_number:02d} rejected: {len(result.errors)} error(s)")
        raise ScheduleValidationError(result.errors)

    payload = editor.build_payload(
        employee_id,
        year,
        week_number,
        week_dates(year, week_number, tz),
        record_id=str(record_id) if record_id is not None else None,
    )
    check_payload(payload)

    if record_id is None:
        schedule = WeeklyScheduleRepository.create(
            session, WeeklySchedule.from_payload(payload, updated_by=updated_by)
        )
    else:
        schedule = WeeklyScheduleRepository.get_by_id(session, record_id)
        if schedule is None:
            raise ValueError(f"No schedule with id {record_id}")
        schedule.status = payload["status"]
        schedule.notes = payload["notes"]
        schedule.schedule_data = payload["scheduleData"]
        schedule.daily_notes = payload["dailyNotes"]
        schedule.daily_dates = payload["dailyDates"]
        schedule.total_weekly_minutes = payload["totalWeeklyMinutes"]
        schedule.updated_by = updated_by
        schedule = WeeklyScheduleRepository.update(session, schedule)

    print(
        f"[OK] Schedule saved for {employee_id} {year}-W{week_number:02d}: "
        f"{editor.format_duration(payload['totalWeeklyMinutes'])}"
    )
    return schedule
