from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .definitions import checklist_for_role, checklist_role_for
from .model import ChecklistCompletion
from .repository import ChecklistRepository


class ChecklistService:
    def __init__(self, checklists: ChecklistRepository, employees: EmployeeRepository):
        self._checklists = checklists
        self._employees = employees

    def toggle_item(
        self,
        *,
        job_id: str,
        employee_id: str,
        item_id: str,
        now: Optional[datetime] = None,
    ) -> tuple[str, ...]:
        """Tick or untick one checklist item for an employee on a job.

        Returns the items completed after the change.
        """

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee does not exist")

        role = checklist_role_for(employee.role)
        valid_ids = {item.item_id for item in checklist_for_role(role)}
        if item_id not in valid_ids:
            raise ValidationError(f"Unknown checklist item for {role.value}: {item_id}")

        current = self._checklists.get_for_job_and_employee(job_id=job_id, employee_id=employee_id)
        items = list(current.items_completed) if current else []
        if item_id in items:
            items.remove(item_id)
        else:
            items.append(item_id)

        self._checklists.save(
            job_id=job_id,
            employee_id=employee_id,
            role=role,
            items_completed=items,
            completed_at=now or now_local(),
        )
        return tuple(items)

    @staticmethod
    def is_complete(completion: ChecklistCompletion) -> bool:
        return completion.is_complete(len(checklist_for_role(completion.role)))
