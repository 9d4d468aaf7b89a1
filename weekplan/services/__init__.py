"""Services around the weekly schedule model."""

from .submission import ScheduleValidationError, check_payload, submit_schedule

__all__ = [
    "ScheduleValidationError",
    "check_payload",
    "submit_schedule",
]
