from __future__ import annotations

import json
import uuid
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import ChecklistRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, json_list
from .model import ChecklistCompletion
from .repository import ChecklistRepository

_COLUMNS = "completion_id, job_id, employee_id, role, items_completed, completed_at"


def _to_completion(r: dict) -> ChecklistCompletion:
    return ChecklistCompletion(
        completion_id=str(r["completion_id"]),
        job_id=str(r["job_id"]),
        employee_id=str(r["employee_id"]),
        role=ChecklistRole(r["role"]),
        items_completed=json_list(r.get("items_completed")),
        completed_at=r.get("completed_at"),
    )


class MySQLChecklistRepository(ChecklistRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_job_and_employee(self, *, job_id: str, employee_id: str) -> Optional[ChecklistCompletion]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM checklist_completions WHERE job_id=%s AND employee_id=%s",
                (job_id, employee_id),
            )
            r = fetchone(cur)
            return _to_completion(r) if r else None

    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[ChecklistCompletion]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM checklist_completions
                WHERE employee_id=%s AND DATE(completed_at) BETWEEN %s AND %s
                ORDER BY completed_at
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_completion(r) for r in fetchall(cur)]

    def save(
        self,
        *,
        job_id: str,
        employee_id: str,
        role: ChecklistRole,
        items_completed: Sequence[str],
        completed_at: datetime,
    ) -> str:
        existing = self.get_for_job_and_employee(job_id=job_id, employee_id=employee_id)
        completion_id = existing.completion_id if existing else str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO checklist_completions(completion_id, job_id, employee_id, role, items_completed, completed_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    role=VALUES(role),
                    items_completed=VALUES(items_completed),
                    completed_at=VALUES(completed_at)
                """,
                (completion_id, job_id, employee_id, role.value, json.dumps(list(items_completed)), completed_at),
            )
        return completion_id
