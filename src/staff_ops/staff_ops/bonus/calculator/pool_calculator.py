from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence, Union

from ...common.datetime_utils import now_local, whole_months_between
from ...common.money import round_money, to_decimal
from ...core.constants import HOURS_PER_PERFECT_WEEK, POINTS_PER_EVENT, SHARES_PER_MONTH
from ...core.policy import CompanyPolicy
from ...damages.model import Damage
from ...employees.model import Employee
from ...mileage.model import MileageEntry
from ...perfect_weeks.model import PerfectWeek
from ...performance.model import PerformanceEvent
from ..model import BonusResult, EmployeePayout
from .base import BonusCalculator

ZERO = Decimal("0")
TWO = Decimal("2")


class BonusEngine(BonusCalculator):
    """Monthly bonus pool allocation.

    gross pool = revenue x percentage / 100, minus damages (unreported ones
    multiplied), clamped at 0 and split 50/50 into a tenure pool (1 share per
    completed month) and a performance pool (1 point per recognition event).
    Mileage is reimbursed on top of the pool. Perfect weeks are counted as
    bonus hours but carry no dollar amount yet.

    Collections are expected to be scoped to the target month already; only
    ``employees`` is filtered here (active only). Inputs are never mutated and
    nothing is validated: callers reject bad revenue/percentage first.
    Rounding to cents happens only on the returned figures.
    """

    def __init__(self, policy: Optional[CompanyPolicy] = None):
        self._policy = policy or CompanyPolicy()

    @property
    def policy(self) -> CompanyPolicy:
        return self._policy

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
        policy: Optional[CompanyPolicy] = None,
    ) -> BonusResult:
        policy = policy or self._policy
        revenue = to_decimal(total_revenue)
        percentage = to_decimal(policy.default_pool_percentage if pool_percentage is None else pool_percentage)
        mileage_rate = to_decimal(policy.mileage_rate)
        multiplier = to_decimal(policy.unreported_damage_multiplier)
        as_of = as_of or now_local()

        active = [e for e in employees if e.is_active]

        gross_pool = revenue * percentage / 100
        damages_deducted = sum(
            (d.pool_impact(multiplier) for d in damages),
            ZERO,
        )
        net_pool = max(ZERO, gross_pool - damages_deducted)
        tenure_pool = net_pool / TWO
        performance_pool = net_pool / TWO

        events_by_employee = _count_by_employee(performance_events)
        miles_by_employee: dict[str, Decimal] = defaultdict(lambda: ZERO)
        for entry in mileage_entries:
            miles_by_employee[entry.employee_id] += to_decimal(entry.miles)
        perfect_weeks_by_employee = _count_by_employee(w for w in perfect_weeks if w.achieved)

        tenure_months = {e.employee_id: max(0, whole_months_between(e.start_date, as_of)) for e in active}
        shares = {emp_id: months * SHARES_PER_MONTH for emp_id, months in tenure_months.items()}
        scores = {e.employee_id: events_by_employee.get(e.employee_id, 0) * POINTS_PER_EVENT for e in active}
        total_shares = sum(shares.values())
        total_score = sum(scores.values())

        payouts = []
        for emp in active:
            emp_shares = shares[emp.employee_id]
            emp_score = scores[emp.employee_id]

            tenure_amount = ZERO
            if total_shares > 0:
                tenure_amount = Decimal(emp_shares) / Decimal(total_shares) * tenure_pool

            performance_amount = ZERO
            if total_score > 0:
                performance_amount = Decimal(emp_score) / Decimal(total_score) * performance_pool

            mileage_amount = miles_by_employee.get(emp.employee_id, ZERO) * mileage_rate
            perfect_week_hours = perfect_weeks_by_employee.get(emp.employee_id, 0) * HOURS_PER_PERFECT_WEEK
            # No hourly rate exists for perfect-week hours yet.
            perfect_week_amount = ZERO

            total_amount = tenure_amount + performance_amount + mileage_amount + perfect_week_amount

            payouts.append(
                EmployeePayout(
                    employee_id=emp.employee_id,
                    employee_name=emp.name,
                    tenure_months=tenure_months[emp.employee_id],
                    tenure_shares=emp_shares,
                    tenure_amount=round_money(tenure_amount),
                    performance_score=emp_score,
                    performance_amount=round_money(performance_amount),
                    mileage_amount=round_money(mileage_amount),
                    perfect_week_hours=perfect_week_hours,
                    perfect_week_amount=round_money(perfect_week_amount),
                    total_amount=round_money(total_amount),
                )
            )

        return BonusResult(
            total_revenue=revenue,
            pool_percentage=percentage,
            gross_pool=round_money(gross_pool),
            damages_deducted=round_money(damages_deducted),
            net_pool=round_money(net_pool),
            tenure_pool=round_money(tenure_pool),
            performance_pool=round_money(performance_pool),
            total_tenure_shares=total_shares,
            total_performance_score=total_score,
            payouts=tuple(payouts),
        )


def _count_by_employee(records) -> dict[str, int]:
    counts: dict[str, int] = defaultdict(int)
    for r in records:
        counts[r.employee_id] += 1
    return counts
