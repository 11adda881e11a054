from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from .base import ArrivalDecision, ArrivalStrategy


class TardyStrategy(ArrivalStrategy):
    """Arrival after the cutoff."""

    def decide(self, *, arrival: Optional[time], cutoff: time) -> ArrivalDecision:
        if arrival is None:
            return ArrivalDecision(is_tardy=False)
        late_by = datetime.combine(date.min, arrival) - datetime.combine(date.min, cutoff)
        minutes = int(late_by.total_seconds() // 60)
        return ArrivalDecision(is_tardy=True, note=f"{minutes} min after {cutoff.strftime('%H:%M')}")
