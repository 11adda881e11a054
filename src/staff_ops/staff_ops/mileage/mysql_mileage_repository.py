from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall
from .model import MileageEntry
from .repository import MileageRepository


class MySQLMileageRepository(MileageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[MileageEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_id, employee_id, job_id, entry_date, miles, amount
                FROM mileage_entries
                WHERE entry_date BETWEEN %s AND %s
                ORDER BY entry_date, entry_id
                """,
                (start_date, end_date),
            )
            return [
                MileageEntry(
                    entry_id=str(r["entry_id"]),
                    employee_id=str(r["employee_id"]),
                    job_id=r.get("job_id"),
                    entry_date=r["entry_date"],
                    miles=as_decimal(r["miles"]),
                    amount=as_decimal(r["amount"]),
                )
                for r in fetchall(cur)
            ]

    def create_entry(
        self,
        *,
        employee_id: str,
        entry_date: date,
        miles: Decimal,
        amount: Decimal,
        job_id: Optional[str] = None,
    ) -> str:
        entry_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO mileage_entries(entry_id, employee_id, job_id, entry_date, miles, amount)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (entry_id, employee_id, job_id, entry_date, miles, amount),
            )
        return entry_id
