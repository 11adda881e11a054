from __future__ import annotations

from datetime import time
from typing import Optional

from .base import ArrivalDecision, ArrivalStrategy


class OnTimeStrategy(ArrivalStrategy):
    """Arrival at or before the cutoff, or no arrival recorded yet."""

    def decide(self, *, arrival: Optional[time], cutoff: time) -> ArrivalDecision:
        return ArrivalDecision(is_tardy=False)
