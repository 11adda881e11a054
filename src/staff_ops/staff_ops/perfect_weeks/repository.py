from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import PerfectWeek


class PerfectWeekRepository(Protocol):
    def list_within(self, *, start_date: date, end_date: date) -> Sequence[PerfectWeek]:
        """Weeks that start on/after ``start_date`` and end on/before ``end_date``."""
        raise NotImplementedError

    def record(self, *, employee_id: str, week_start: date, week_end: date, achieved: bool) -> None:
        """Insert or replace the outcome for one employee-week."""
        raise NotImplementedError
