from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..core.enums import PerformanceEventType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PerformanceEvent
from .repository import PerformanceEventRepository


class MySQLPerformanceEventRepository(PerformanceEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[PerformanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, employee_id, event_type, event_date, description
                FROM performance_events
                WHERE event_date BETWEEN %s AND %s
                ORDER BY event_date, event_id
                """,
                (start_date, end_date),
            )
            return [
                PerformanceEvent(
                    event_id=str(r["event_id"]),
                    employee_id=str(r["employee_id"]),
                    event_type=PerformanceEventType(r["event_type"]),
                    event_date=r["event_date"],
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]

    def create_event(
        self,
        *,
        employee_id: str,
        event_type: PerformanceEventType,
        event_date: date,
        description: Optional[str] = None,
    ) -> str:
        event_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO performance_events(event_id, employee_id, event_type, event_date, description)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (event_id, employee_id, event_type.value, event_date, description),
            )
        return event_id
