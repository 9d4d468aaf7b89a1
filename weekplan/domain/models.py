"""SQLAlchemy models for persisted weekly schedules."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase


SCHEDULE_STATUSES = ("draft", "pending", "approved", "rejected")


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class WeeklySchedule(Base):
    """One employee's submitted schedule for one ISO week."""

    __tablename__ = "weekly_schedules"
    __table_args__ = (
        UniqueConstraint("employee_id", "year", "week_number", name="uq_schedule_employee_week"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(String(64), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    week_number = Column(Integer, nullable=False)  # ISO week, 1-53
    status = Column(String(20), nullable=False, default="approved")
    notes = Column(Text, nullable=False, default="")

    # Wire shapes: {day: ["HH:MM-HH:MM"]}, {day: note}, {day: ISO date}
    schedule_data = Column(JSON, nullable=False)
    daily_notes = Column(JSON, nullable=False, default=dict)
    daily_dates = Column(JSON, nullable=False, default=dict)
    total_weekly_minutes = Column(Integer, nullable=False, default=0)

    updated_by = Column(String(64), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "_id": str(self.id),
            "employeeId": self.employee_id,
            "year": self.year,
            "weekNumber": self.week_number,
            "status": self.status,
            "notes": self.notes or "",
            "scheduleData": dict(self.schedule_data or {}),
            "dailyNotes": dict(self.daily_notes or {}),
            "dailyDates": dict(self.daily_dates or {}),
            "totalWeeklyMinutes": self.total_weekly_minutes,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], updated_by: str | None = None) -> "WeeklySchedule":
        return cls(
            employee_id=str(payload["employeeId"]),
            year=int(payload["year"]),
            week_number=int(payload["weekNumber"]),
            status=payload.get("status") or "approved",
            notes=payload.get("notes") or "",
            schedule_data=dict(payload["scheduleData"]),
            daily_notes=dict(payload.get("dailyNotes") or {}),
            daily_dates=dict(payload.get("dailyDates") or {}),
            total_weekly_minutes=int(payload["totalWeeklyMinutes"]),
            updated_by=updated_by,
        )

    def __repr__(self) -> str:
        return (
            f"<WeeklySchedule(id={self.id}, employee='{self.employee_id}', "
            f"week={self.year}-W{self.week_number:02d}, status='{self.status}')>"
        )
