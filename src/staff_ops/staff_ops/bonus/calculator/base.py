from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from typing import Sequence, Union

from ...damages.model import Damage
from ...employees.model import Employee
from ...mileage.model import MileageEntry
from ...perfect_weeks.model import PerfectWeek
from ...performance.model import PerformanceEvent
from ..model import BonusResult


class BonusCalculator(ABC):
    """Calculator interface (Strategy Pattern for bonus pool allocation)."""

    @abstractmethod
    def calculate(
        self,
        *,
        total_revenue: Union[Decimal, int, float, str],
        pool_percentage: Union[Decimal, int, float, str, None] = None,
        as_of: Union[date, datetime, None] = None,
        employees: Sequence[Employee] = (),
        damages: Sequence[Damage] = (),
        performance_events: Sequence[PerformanceEvent] = (),
        mileage_entries: Sequence[MileageEntry] = (),
        perfect_weeks: Sequence[PerfectWeek] = (),
    ) -> BonusResult:
        raise NotImplementedError
