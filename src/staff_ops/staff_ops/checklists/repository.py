from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ChecklistRole
from .model import ChecklistCompletion


class ChecklistRepository(Protocol):
    def get_for_job_and_employee(self, *, job_id: str, employee_id: str) -> Optional[ChecklistCompletion]:
        raise NotImplementedError

    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[ChecklistCompletion]:
        raise NotImplementedError

    def save(
        self,
        *,
        job_id: str,
        employee_id: str,
        role: ChecklistRole,
        items_completed: Sequence[str],
        completed_at: datetime,
    ) -> str:
        raise NotImplementedError
