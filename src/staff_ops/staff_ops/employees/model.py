from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeRole


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: plain data object (no DB access code). Tenure is derived from
    ``start_date`` at calculation time and never stored.
    """

    employee_id: str
    name: str
    start_date: date
    is_active: bool = True
    role: EmployeeRole = EmployeeRole.HELPER
    email: Optional[str] = None
    is_admin: bool = False
