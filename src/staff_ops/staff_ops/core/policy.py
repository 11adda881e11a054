from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from decimal import Decimal
from typing import Any

from .constants import (
    DEFAULT_MILEAGE_RATE,
    DEFAULT_POOL_PERCENTAGE,
    DEFAULT_TARDY_CUTOFF,
    DEFAULT_UNREPORTED_DAMAGE_MULTIPLIER,
    DEFAULT_WAREHOUSE_ADDRESS,
)


@dataclass(frozen=True)
class CompanyPolicy:
    """Per-deployment money and attendance rules.

    Passed explicitly into the bonus engine and services so a calculation can
    be replayed with any policy values.
    """

    mileage_rate: Decimal = DEFAULT_MILEAGE_RATE
    tardy_cutoff: time = DEFAULT_TARDY_CUTOFF
    default_pool_percentage: Decimal = DEFAULT_POOL_PERCENTAGE
    unreported_damage_multiplier: Decimal = DEFAULT_UNREPORTED_DAMAGE_MULTIPLIER
    warehouse_address: str = DEFAULT_WAREHOUSE_ADDRESS

    @classmethod
    def from_settings(cls, settings: Any) -> "CompanyPolicy":
        """Build a policy from a settings module, keeping defaults for missing names."""

        cutoff = getattr(settings, "TARDY_CUTOFF", None)
        if isinstance(cutoff, str):
            cutoff = datetime.strptime(cutoff.strip(), "%H:%M").time()

        return cls(
            mileage_rate=_decimal_or(getattr(settings, "MILEAGE_RATE", None), DEFAULT_MILEAGE_RATE),
            tardy_cutoff=cutoff or DEFAULT_TARDY_CUTOFF,
            default_pool_percentage=_decimal_or(
                getattr(settings, "DEFAULT_POOL_PERCENTAGE", None), DEFAULT_POOL_PERCENTAGE
            ),
            unreported_damage_multiplier=_decimal_or(
                getattr(settings, "UNREPORTED_DAMAGE_MULTIPLIER", None), DEFAULT_UNREPORTED_DAMAGE_MULTIPLIER
            ),
            warehouse_address=str(getattr(settings, "WAREHOUSE_ADDRESS", None) or DEFAULT_WAREHOUSE_ADDRESS),
        )


def _decimal_or(value: Any, default: Decimal) -> Decimal:
    if value is None or value == "":
        return default
    return Decimal(str(value))
