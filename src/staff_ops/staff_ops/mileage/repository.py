from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import MileageEntry


class MileageRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[MileageEntry]:
        raise NotImplementedError

    def create_entry(
        self,
        *,
        employee_id: str,
        entry_date: date,
        miles: Decimal,
        amount: Decimal,
        job_id: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
