"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Deployments override them through ``CompanyPolicy.from_settings``.
"""

from datetime import time
from decimal import Decimal

DEFAULT_MILEAGE_RATE = Decimal("0.60")
DEFAULT_TARDY_CUTOFF = time(7, 15)
DEFAULT_POOL_PERCENTAGE = Decimal("4.5")
DEFAULT_UNREPORTED_DAMAGE_MULTIPLIER = Decimal("2")
DEFAULT_WAREHOUSE_ADDRESS = "1285 Collier Rd NW, Atlanta, GA 30318"

# 1 month of service = 1 tenure share
SHARES_PER_MONTH = 1
# 1 recognition event = 1 performance point, whatever its type
POINTS_PER_EVENT = 1
# 1 achieved perfect week = 1 bonus hour
HOURS_PER_PERFECT_WEEK = 1
