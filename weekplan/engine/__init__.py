"""Schedule proposal interfaces."""

from .base import BaseScheduleProposer, load_proposal

__all__ = [
    "BaseScheduleProposer",
    "load_proposal",
]
