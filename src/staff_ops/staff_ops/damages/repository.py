from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Damage


class DamageRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Damage]:
        raise NotImplementedError

    def create_damage(
        self,
        *,
        employee_ids: Sequence[str],
        description: str,
        amount: Decimal,
        was_reported: bool,
        logged_on: date,
        job_id: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
