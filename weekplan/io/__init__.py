"""I/O utilities for CSV export."""

from .export_csv import export_schedules_csv

__all__ = [
    "export_schedules_csv",
]
