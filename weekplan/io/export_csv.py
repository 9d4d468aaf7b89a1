"""CSV export of persisted weekly schedules."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from sqlalchemy.orm import Session

from weekplan.data_io import slots_frame
from weekplan.domain.repositories import WeeklyScheduleRepository


EXPORT_COLUMNS = ["employee_id", "year", "week_number", "day", "slot", "start", "end", "minutes"]


def export_schedules_csv(
    session: Session,
    csv_path: str | Path,
    year: int,
    week_number: int,
    status: str | None = "approved",
) -> int:
    """
    Export one row per time slot for every schedule of a week.

    Args:
        session: Database session
        csv_path: Output CSV path
        year: ISO year
        week_number: ISO week number
        status: Only export schedules with this status (None for all)

    Returns:
        Number of slot rows written
    """
    schedules = WeeklyScheduleRepository.get_by_week(session, year, week_number, status=status)

    frames = []
    for schedule in schedules:
        frame = slots_frame(schedule.to_payload())
        frame.insert(0, "week_number", schedule.week_number)
        frame.insert(0, "year", schedule.year)
        frame.insert(0, "employee_id", schedule.employee_id)
        frames.append(frame)

    if frames:
        df = pd.concat(frames, ignore_index=True)
    else:
        df = pd.DataFrame(columns=EXPORT_COLUMNS)
    df[EXPORT_COLUMNS].to_csv(csv_path, index=False)

    print(f"[INFO] Exported {len(df)} slots from {len(schedules)} schedules to {csv_path}")
    return len(df)
