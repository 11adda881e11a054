from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class ArrivalDecision:
    is_tardy: bool
    note: Optional[str] = None


class ArrivalStrategy(ABC):
    """Strategy Pattern: encapsulate how we judge an arrival time."""

    @abstractmethod
    def decide(self, *, arrival: Optional[time], cutoff: time) -> ArrivalDecision:
        raise NotImplementedError
