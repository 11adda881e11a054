from __future__ import annotations

import json
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, json_list
from .model import Damage
from .repository import DamageRepository


class MySQLDamageRepository(DamageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Damage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT damage_id, job_id, employee_ids, description, amount, was_reported, logged_on
                FROM damages
                WHERE logged_on BETWEEN %s AND %s
                ORDER BY logged_on, damage_id
                """,
                (start_date, end_date),
            )
            return [
                Damage(
                    damage_id=str(r["damage_id"]),
                    job_id=r.get("job_id"),
                    employee_ids=json_list(r.get("employee_ids")),
                    description=r.get("description") or "",
                    amount=as_decimal(r["amount"]),
                    was_reported=bool(r["was_reported"]),
                    logged_on=r["logged_on"],
                )
                for r in fetchall(cur)
            ]

    def create_damage(
        self,
        *,
        employee_ids: Sequence[str],
        description: str,
        amount: Decimal,
        was_reported: bool,
        logged_on: date,
        job_id: Optional[str] = None,
    ) -> str:
        damage_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO damages(damage_id, job_id, employee_ids, description, amount, was_reported, logged_on)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    damage_id,
                    job_id,
                    json.dumps(list(employee_ids)),
                    description,
                    amount,
                    1 if was_reported else 0,
                    logged_on,
                ),
            )
        return damage_id
