from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PerfectWeek
from .repository import PerfectWeekRepository


class MySQLPerfectWeekRepository(PerfectWeekRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_within(self, *, start_date: date, end_date: date) -> Sequence[PerfectWeek]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, week_start, week_end, achieved
                FROM perfect_weeks
                WHERE week_start >= %s AND week_end <= %s
                ORDER BY week_start, employee_id
                """,
                (start_date, end_date),
            )
            return [
                PerfectWeek(
                    employee_id=str(r["employee_id"]),
                    week_start=r["week_start"],
                    week_end=r["week_end"],
                    achieved=bool(r["achieved"]),
                )
                for r in fetchall(cur)
            ]

    def record(self, *, employee_id: str, week_start: date, week_end: date, achieved: bool) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO perfect_weeks(employee_id, week_start, week_end, achieved)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE week_end=VALUES(week_end), achieved=VALUES(achieved)
                """,
                (employee_id, week_start, week_end, int(achieved)),
            )
