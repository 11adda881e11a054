from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PerformanceEventType
from .model import PerformanceEvent


class PerformanceEventRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[PerformanceEvent]:
        raise NotImplementedError

    def create_event(
        self,
        *,
        employee_id: str,
        event_type: PerformanceEventType,
        event_date: date,
        description: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
