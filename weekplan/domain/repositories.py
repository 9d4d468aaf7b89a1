"""Repository classes for weekly schedule data access."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from .models import SCHEDULE_STATUSES, WeeklySchedule


MIN_YEAR = 2020
MAX_YEAR = 2050


class DuplicateScheduleError(ValueError):
    """Raised when a schedule already exists for an employee and week."""


def check_week_params(year: int, week_number: int) -> None:
    if not MIN_YEAR <= int(year) <= MAX_YEAR or not 1 <= int(week_number) <= 53:
        raise ValueError(
            "Paramètres invalides. L'année doit être entre 2020 et 2050, "
            "et la semaine entre 1 et 53."
        )


class WeeklyScheduleRepository:
    """Repository for weekly schedule data access."""

    @staticmethod
    def get_by_id(session: Session, schedule_id: int) -> Optional[WeeklySchedule]:
        return session.get(WeeklySchedule, int(schedule_id))

    @staticmethod
    def get_by_key(session: Session, employee_id: str, year: int, week_number: int) -> Optional[WeeklySchedule]:
        """Get the schedule of one employee for one ISO week."""
        return (
            session.query(WeeklySchedule)
            .filter(
                WeeklySchedule.employee_id == str(employee_id),
                WeeklySchedule.year == int(year),
                WeeklySchedule.week_number == int(week_number),
            )
            .first()
        )

    @staticmethod
    def get_by_week(
        session: Session, year: int, week_number: int, status: str | None = "approved"
    ) -> List[WeeklySchedule]:
        """Get all schedules for a week, approved ones only unless ``status`` is None."""
        check_week_params(year, week_number)
        query = session.query(WeeklySchedule).filter(
            WeeklySchedule.year == int(year),
            WeeklySchedule.week_number == int(week_number),
        )
        if status is not None:
            query = query.filter(WeeklySchedule.status == status)
        return query.order_by(WeeklySchedule.employee_id).all()

    @staticmethod
    def create(session: Session, schedule: WeeklySchedule) -> WeeklySchedule:
        """Create a new schedule. One per employee and week."""
        if schedule.status not in SCHEDULE_STATUSES:
            raise ValueError(f"Unknown schedule status: {schedule.status!r}")
        existing = WeeklyScheduleRepository.get_by_key(
            session, schedule.employee_id, schedule.year, schedule.week_number
        )
        if existing is not None:
            raise DuplicateScheduleError(
                "Un planning existe déjà pour cet employé cette semaine et cette année"
            )
        session.add(schedule)
        session.commit()
        session.refresh(schedule)
        return schedule

    @staticmethod
    def update(session: Session, schedule: WeeklySchedule) -> WeeklySchedule:
        """Update an existing schedule."""
        if schedule.status not in SCHEDULE_STATUSES:
            raise ValueError(f"Unknown schedule status: {schedule.status!r}")
        merged = session.merge(schedule)
        session.commit()
        return merged

    @staticmethod
    def delete(session: Session, schedule_id: int) -> bool:
        schedule = session.get(WeeklySchedule, int(schedule_id))
        if schedule is None:
            return False
        session.delete(schedule)
        session.commit()
        return True
