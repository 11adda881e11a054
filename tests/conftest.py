from __future__ import annotations

from datetime import date, datetime

import pytest

from src.staff_ops.staff_ops.core.enums import EmployeeRole
from src.staff_ops.staff_ops.employees.model import Employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 9, 0, 0)


@pytest.fixture
def make_employee():
    def _make(employee_id: str, *, start: date, active: bool = True, role: EmployeeRole = EmployeeRole.HELPER):
        return Employee(
            employee_id=employee_id,
            name=employee_id.upper(),
            start_date=start,
            is_active=active,
            role=role,
        )

    return _make
