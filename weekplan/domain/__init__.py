"""Domain models and data access layer."""

from .models import Base, WeeklySchedule
from .repositories import DuplicateScheduleError, WeeklyScheduleRepository

__all__ = [
    "Base",
    "WeeklySchedule",
    "WeeklyScheduleRepository",
    "DuplicateScheduleError",
]
