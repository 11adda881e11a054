from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import PerformanceEventType


@dataclass(frozen=True)
class PerformanceEvent:
    """Domain entity: a recognition event (review or callout) for one employee."""

    event_id: str
    employee_id: str
    event_type: PerformanceEventType
    event_date: date
    description: Optional[str] = None
