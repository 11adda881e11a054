from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import to_decimal


@dataclass(frozen=True)
class Damage:
    """Domain entity: a damage incident logged against a job.

    Immutable once logged.
    """

    damage_id: str
    amount: Decimal
    was_reported: bool
    logged_on: date
    description: str = ""
    job_id: Optional[str] = None
    employee_ids: tuple[str, ...] = field(default_factory=tuple)

    def pool_impact(self, unreported_multiplier: Decimal) -> Decimal:
        """Amount taken out of the gross pool for this incident."""
        if self.was_reported:
            return to_decimal(self.amount)
        return to_decimal(self.amount) * to_decimal(unreported_multiplier)
