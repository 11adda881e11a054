from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from ..common.validators import require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .repository import DamageRepository

logger = logging.getLogger(__name__)


class DamageService:
    def __init__(self, damages: DamageRepository, employees: EmployeeRepository):
        self._damages = damages
        self._employees = employees

    def log_damage(
        self,
        *,
        employee_ids: Iterable[str],
        description: str,
        amount: Any,
        was_reported: bool,
        logged_on: date,
        job_id: Optional[str] = None,
    ) -> str:
        """Record a damage incident against the crew on a job.

        Unreported incidents are stored as-is; the multiplier is applied when
        the bonus pool is calculated.
        """

        crew = list(dict.fromkeys(str(e) for e in employee_ids if e))
        if not crew:
            raise ValidationError("At least one employee is required")
        missing = [e for e in crew if not self._employees.get_by_id(e)]
        if missing:
            raise ValidationError(f"Employee does not exist: {', '.join(missing)}")

        text = require_non_empty(description, "Description")
        amount_d = require_non_negative(amount, "Amount")

        damage_id = self._damages.create_damage(
            employee_ids=tuple(crew),
            description=text,
            amount=amount_d,
            was_reported=bool(was_reported),
            logged_on=logged_on,
            job_id=job_id or None,
        )
        logger.info("damage %s logged: amount=%s reported=%s crew=%d", damage_id, amount_d, was_reported, len(crew))
        return damage_id
