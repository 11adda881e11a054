from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        employee_id: str,
        work_date: date,
        arrival_time: Optional[time],
        is_tardy: bool,
        in_uniform: bool,
        notes: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
