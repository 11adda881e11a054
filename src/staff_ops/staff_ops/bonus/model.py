from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class EmployeePayout:
    """One employee's share of a monthly bonus run (amounts rounded to cents)."""

    employee_id: str
    employee_name: str
    tenure_months: int
    tenure_shares: int
    tenure_amount: Decimal
    performance_score: int
    performance_amount: Decimal
    mileage_amount: Decimal
    perfect_week_hours: int
    perfect_week_amount: Decimal
    total_amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "tenure_months": self.tenure_months,
            "tenure_shares": self.tenure_shares,
            "tenure_amount": _money(self.tenure_amount),
            "performance_score": self.performance_score,
            "performance_amount": _money(self.performance_amount),
            "mileage_amount": _money(self.mileage_amount),
            "perfect_week_hours": self.perfect_week_hours,
            "perfect_week_amount": _money(self.perfect_week_amount),
            "total_amount": _money(self.total_amount),
        }


@dataclass(frozen=True)
class BonusResult:
    """Pool breakdown plus per-employee payouts, in the caller's employee order."""

    total_revenue: Decimal
    pool_percentage: Decimal
    gross_pool: Decimal
    damages_deducted: Decimal
    net_pool: Decimal
    tenure_pool: Decimal
    performance_pool: Decimal
    total_tenure_shares: int
    total_performance_score: int
    payouts: tuple[EmployeePayout, ...] = field(default_factory=tuple)

    @property
    def total_disbursed(self) -> Decimal:
        """Sum of all payouts; can exceed ``net_pool`` because mileage sits outside the pool."""
        return sum((p.total_amount for p in self.payouts), Decimal("0"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_revenue": str(self.total_revenue),
            "pool_percentage": str(self.pool_percentage),
            "gross_pool": _money(self.gross_pool),
            "damages_deducted": _money(self.damages_deducted),
            "net_pool": _money(self.net_pool),
            "tenure_pool": _money(self.tenure_pool),
            "performance_pool": _money(self.performance_pool),
            "total_tenure_shares": self.total_tenure_shares,
            "total_performance_score": self.total_performance_score,
            "payouts": [p.to_dict() for p in self.payouts],
        }


@dataclass(frozen=True)
class MonthlyBonusReport:
    """Bonus run for a calendar month, as handed back to the admin page."""

    year: int
    month: int
    period_start: date
    period_end: date
    result: BonusResult

    def to_dict(self) -> dict[str, Any]:
        data = {
            "year": self.year,
            "month": self.month,
            "period_start": self.period_start.strftime("%Y-%m-%d"),
            "period_end": self.period_end.strftime("%Y-%m-%d"),
        }
        data.update(self.result.to_dict())
        return data
