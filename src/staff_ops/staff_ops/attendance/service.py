from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

from ..core.exceptions import ValidationError
from ..core.policy import CompanyPolicy
from ..employees.repository import EmployeeRepository
from .factory import ArrivalStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        policy: Optional[CompanyPolicy] = None,
        strategy_factory: Optional[ArrivalStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._policy = policy or CompanyPolicy()
        self._factory = strategy_factory or ArrivalStrategyFactory()

    @staticmethod
    def _parse_time(value: str) -> Optional[time]:
        v = (value or "").strip()
        if not v:
            return None
        try:
            return datetime.strptime(v, "%H:%M").time()
        except ValueError:
            raise ValidationError("Invalid arrival time (HH:MM)")

    def is_tardy(self, arrival: Optional[time]) -> bool:
        cutoff = self._policy.tardy_cutoff
        strategy = self._factory.for_arrival(arrival=arrival, cutoff=cutoff)
        return strategy.decide(arrival=arrival, cutoff=cutoff).is_tardy

    def log_day(
        self,
        *,
        employee_id: str,
        work_date: date,
        arrival_time: str,
        in_uniform: bool = True,
        notes: str = "",
    ) -> str:
        """Record (or overwrite) an employee's arrival for a work day."""

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee does not exist")
        if not employee.is_active:
            raise ValidationError("Employee is inactive")

        arrival = self._parse_time(arrival_time)
        cutoff = self._policy.tardy_cutoff
        strategy = self._factory.for_arrival(arrival=arrival, cutoff=cutoff)
        decision = strategy.decide(arrival=arrival, cutoff=cutoff)

        note = (notes or "").strip() or decision.note
        return self._attendance.upsert(
            employee_id=employee_id,
            work_date=work_date,
            arrival_time=arrival,
            is_tardy=decision.is_tardy,
            in_uniform=bool(in_uniform),
            notes=note,
        )

    def records_between(self, *, employee_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        if end < start:
            raise ValidationError("End date must be on or after start date")
        return self._attendance.list_for_employee_between(employee_id=employee_id, start_date=start, end_date=end)
