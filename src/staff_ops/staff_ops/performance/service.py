from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.enums import PerformanceEventType
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .repository import PerformanceEventRepository


class PerformanceService:
    def __init__(self, events: PerformanceEventRepository, employees: EmployeeRepository):
        self._events = events
        self._employees = employees

    @staticmethod
    def _parse_type(value: Any) -> PerformanceEventType:
        if isinstance(value, PerformanceEventType):
            return value
        try:
            return PerformanceEventType(str(value or "").strip().lower())
        except ValueError:
            allowed = ", ".join(t.value for t in PerformanceEventType)
            raise ValidationError(f"Event type must be one of: {allowed}")

    def log_event(
        self,
        *,
        employee_id: str,
        event_type: Any,
        event_date: date,
        description: Optional[str] = None,
    ) -> str:
        """Record a recognition event; each one adds a point to the performance pool."""

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        return self._events.create_event(
            employee_id=employee_id,
            event_type=self._parse_type(event_type),
            event_date=event_date,
            description=(description or "").strip() or None,
        )
