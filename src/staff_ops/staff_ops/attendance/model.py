from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's arrival on one work day."""

    attendance_id: str
    employee_id: str
    work_date: date
    arrival_time: Optional[time]
    is_tardy: bool
    in_uniform: bool
    notes: Optional[str] = None
