from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .strategies.base import ArrivalStrategy
from .strategies.on_time_strategy import OnTimeStrategy
from .strategies.tardy_strategy import TardyStrategy


@dataclass
class ArrivalStrategyFactory:
    """Factory Pattern: choose the arrival strategy from the tardy cutoff."""

    def for_arrival(self, *, arrival: Optional[time], cutoff: time) -> ArrivalStrategy:
        if arrival is None:
            return OnTimeStrategy()
        # Only minutes matter: 07:15:59 is still on time for a 07:15 cutoff.
        if (arrival.hour, arrival.minute) > (cutoff.hour, cutoff.minute):
            return TardyStrategy()
        return OnTimeStrategy()
