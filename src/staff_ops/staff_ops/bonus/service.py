from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_window, now_local
from ..common.validators import require_percentage, require_positive
from ..core.exceptions import AuthorizationError, ValidationError
from ..core.policy import CompanyPolicy
from ..damages.model import Damage
from ..damages.repository import DamageRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..mileage.model import MileageEntry
from ..mileage.repository import MileageRepository
from ..perfect_weeks.model import PerfectWeek
from ..perfect_weeks.repository import PerfectWeekRepository
from ..performance.model import PerformanceEvent
from ..performance.repository import PerformanceEventRepository
from .calculator.base import BonusCalculator
from .calculator.pool_calculator import BonusEngine
from .model import MonthlyBonusReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthSnapshot:
    """Point-in-time records feeding one bonus run."""

    employees: Sequence[Employee]
    damages: Sequence[Damage]
    performance_events: Sequence[PerformanceEvent]
    mileage_entries: Sequence[MileageEntry]
    perfect_weeks: Sequence[PerfectWeek]


class BonusService:
    """Fetches a month snapshot, validates the admin's inputs and runs the calculator."""

    def __init__(
        self,
        employees: EmployeeRepository,
        damages: DamageRepository,
        performance: PerformanceEventRepository,
        mileage: MileageRepository,
        perfect_weeks: PerfectWeekRepository,
        *,
        policy: Optional[CompanyPolicy] = None,
        calculator: Optional[BonusCalculator] = None,
    ):
        self._employees = employees
        self._damages = damages
        self._performance = performance
        self._mileage = mileage
        self._perfect_weeks = perfect_weeks
        self._policy = policy or CompanyPolicy()
        self._calculator = calculator or BonusEngine(self._policy)

    def load_snapshot(self, *, start: date, end: date) -> MonthSnapshot:
        return MonthSnapshot(
            employees=list(self._employees.list_all(active_only=True)),
            damages=list(self._damages.list_between(start_date=start, end_date=end)),
            performance_events=list(self._performance.list_between(start_date=start, end_date=end)),
            mileage_entries=list(self._mileage.list_between(start_date=start, end_date=end)),
            perfect_weeks=list(self._perfect_weeks.list_within(start_date=start, end_date=end)),
        )

    def calculate_month(
        self,
        *,
        can_manage: bool,
        revenue: Any,
        pool_percentage: Any = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> MonthlyBonusReport:
        """Run the bonus calculation for a calendar month (default: current month).

        ``can_manage`` is the caller's admin capability; auth itself lives elsewhere.
        Tenure is measured at ``now``, or at month end for a past month.
        """

        if not can_manage:
            raise AuthorizationError("Only admins can calculate bonuses")

        total_revenue = require_positive(revenue, "Revenue")
        if pool_percentage is None or (isinstance(pool_percentage, str) and not pool_percentage.strip()):
            percentage = self._policy.default_pool_percentage
        else:
            percentage = require_percentage(pool_percentage, "Pool percentage")

        now = now or now_local()
        try:
            year = now.year if year in (None, "") else int(year)
            month = now.month if month in (None, "") else int(month)
        except (TypeError, ValueError):
            raise ValidationError("Year and month must be whole numbers")
        if not 1 <= year <= 9999 or not 1 <= month <= 12:
            raise ValidationError("Invalid year or month")

        start, end = month_window(year, month)
        snapshot = self.load_snapshot(start=start, end=end)
        # Past months measure tenure at month end.
        as_of = now if now.date() <= end else end

        result = self._calculator.calculate(
            total_revenue=total_revenue,
            pool_percentage=percentage,
            as_of=as_of,
            employees=snapshot.employees,
            damages=snapshot.damages,
            performance_events=snapshot.performance_events,
            mileage_entries=snapshot.mileage_entries,
            perfect_weeks=snapshot.perfect_weeks,
        )
        logger.info(
            "bonus run %04d-%02d: employees=%d net_pool=%s disbursed=%s",
            year,
            month,
            len(result.payouts),
            result.net_pool,
            result.total_disbursed,
        )
        return MonthlyBonusReport(year=year, month=month, period_start=start, period_end=end, result=result)
