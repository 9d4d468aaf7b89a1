"""Interface to schedule proposal services (e.g. AI-assisted generation)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from weekplan.config import EditorConfig
from weekplan.editor import ScheduleEditor


class BaseScheduleProposer(ABC):
    """
    Abstract base class for services that propose a weekly schedule.

    A proposal uses the same wire shape as a submitted schedule. It is only
    a starting point: it goes through the editor and the validator like any
    hand-made schedule.
    """

    name: str | None = None  # Override in subclasses

    @abstractmethod
    def propose_schedule(
        self,
        employee_id: str,
        year: int,
        week_number: int,
    ) -> Dict[str, Any]:
        """
        Propose a schedule for an employee and ISO week.

        Returns:
            Dict with ``scheduleData`` ({day: ["HH:MM-HH:MM"]}) and optionally
            ``dailyNotes`` and ``notes``
        """
        pass

    def get_name(self) -> str:
        return self.name or type(self).__name__


def load_proposal(proposal: Mapping[str, Any], cfg: EditorConfig | None = None) -> ScheduleEditor:
    """Open a proposed schedule in a fresh editor."""
    return ScheduleEditor.from_record(proposal, cfg)
