from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import ChecklistRole


@dataclass(frozen=True)
class ChecklistItem:
    item_id: str
    label: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ChecklistCompletion:
    """Domain entity: items an employee ticked off for one job."""

    completion_id: str
    job_id: str
    employee_id: str
    role: ChecklistRole
    items_completed: tuple[str, ...] = field(default_factory=tuple)
    completed_at: Optional[datetime] = None

    def is_complete(self, total_items: int) -> bool:
        return len(self.items_completed) >= total_items
