from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PerfectWeek:
    """Domain entity: outcome of one employee's week.

    Only ``achieved`` weeks earn a bonus hour.
    """

    employee_id: str
    week_start: date
    week_end: date
    achieved: bool
