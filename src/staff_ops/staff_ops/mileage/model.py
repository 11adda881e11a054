from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class MileageEntry:
    """Domain entity: personal-vehicle miles driven for the company."""

    entry_id: str
    employee_id: str
    entry_date: date
    miles: Decimal
    amount: Decimal
    job_id: Optional[str] = None


@dataclass(frozen=True)
class MileageSummary:
    """Read-model: per-employee totals for a period."""

    employee_id: str
    trips: int
    total_miles: Decimal
    total_amount: Decimal
