from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import month_window
from ..common.money import round_money
from ..common.validators import require_non_negative
from ..core.exceptions import ValidationError
from ..core.policy import CompanyPolicy
from ..employees.repository import EmployeeRepository
from .model import MileageSummary
from .repository import MileageRepository


class MileageService:
    def __init__(
        self,
        mileage: MileageRepository,
        employees: EmployeeRepository,
        *,
        policy: Optional[CompanyPolicy] = None,
    ):
        self._mileage = mileage
        self._employees = employees
        self._policy = policy or CompanyPolicy()

    def log_trip(
        self,
        *,
        employee_id: str,
        entry_date: date,
        miles: Any,
        job_id: Optional[str] = None,
    ) -> str:
        """Store a mileage entry, pricing it at the configured rate per mile."""

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        miles_d = require_non_negative(miles, "Miles")
        amount = round_money(miles_d * self._policy.mileage_rate)
        return self._mileage.create_entry(
            employee_id=employee_id,
            entry_date=entry_date,
            miles=miles_d,
            amount=amount,
            job_id=job_id or None,
        )

    def month_summary(self, *, year: int, month: int) -> list[MileageSummary]:
        start, end = month_window(year, month)
        entries = self._mileage.list_between(start_date=start, end_date=end)

        summary_map: dict[str, dict] = defaultdict(
            lambda: {"trips": 0, "miles": Decimal("0"), "amount": Decimal("0")}
        )
        for e in entries:
            s = summary_map[e.employee_id]
            s["trips"] += 1
            s["miles"] += e.miles
            s["amount"] += e.amount

        summary = [
            MileageSummary(
                employee_id=emp_id,
                trips=s["trips"],
                total_miles=s["miles"],
                total_amount=round_money(s["amount"]),
            )
            for emp_id, s in summary_map.items()
        ]
        summary.sort(key=lambda x: x.total_amount, reverse=True)
        return summary
