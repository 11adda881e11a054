from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, email, role, start_date, is_active, is_admin"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        email=r.get("email"),
        role=EmployeeRole(r["role"]),
        start_date=r["start_date"],
        is_active=bool(r["is_active"]),
        is_admin=bool(r.get("is_admin")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self, *, active_only: bool = False) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees"
        if active_only:
            sql += " WHERE is_active=1"
        sql += " ORDER BY name"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return [_to_employee(r) for r in fetchall(cur)]
