from __future__ import annotations

import uuid
from datetime import date, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, arrival_time, is_tardy, in_uniform, notes"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        arrival_time=normalize_mysql_time(r.get("arrival_time")),
        is_tardy=bool(r["is_tardy"]),
        in_uniform=bool(r["in_uniform"]),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

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
        existing = self.get_for_employee_and_date(employee_id, work_date)
        attendance_id = existing.attendance_id if existing else str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(attendance_id, employee_id, work_date, arrival_time, is_tardy, in_uniform, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    arrival_time=VALUES(arrival_time),
                    is_tardy=VALUES(is_tardy),
                    in_uniform=VALUES(in_uniform),
                    notes=VALUES(notes)
                """,
                (attendance_id, employee_id, work_date, arrival_time, int(is_tardy), int(in_uniform), notes),
            )
        return attendance_id
