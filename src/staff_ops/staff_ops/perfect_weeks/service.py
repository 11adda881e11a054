from __future__ import annotations

from datetime import date, timedelta

from ..attendance.repository import AttendanceRepository
from ..checklists.repository import ChecklistRepository
from ..employees.repository import EmployeeRepository
from .evaluator import is_perfect_week
from .model import PerfectWeek
from .repository import PerfectWeekRepository


class PerfectWeekService:
    def __init__(
        self,
        perfect_weeks: PerfectWeekRepository,
        attendance: AttendanceRepository,
        checklists: ChecklistRepository,
        employees: EmployeeRepository,
    ):
        self._perfect_weeks = perfect_weeks
        self._attendance = attendance
        self._checklists = checklists
        self._employees = employees

    def evaluate_week(self, *, week_start: date) -> list[PerfectWeek]:
        """Evaluate and record the week starting at ``week_start`` for all active employees."""

        week_end = week_start + timedelta(days=6)

        results = []
        for emp in self._employees.list_all(active_only=True):
            attendance = self._attendance.list_for_employee_between(
                employee_id=emp.employee_id, start_date=week_start, end_date=week_end
            )
            completions = self._checklists.list_for_employee_between(
                employee_id=emp.employee_id, start_date=week_start, end_date=week_end
            )
            achieved = is_perfect_week(attendance, completions)
            self._perfect_weeks.record(
                employee_id=emp.employee_id, week_start=week_start, week_end=week_end, achieved=achieved
            )
            results.append(
                PerfectWeek(employee_id=emp.employee_id, week_start=week_start, week_end=week_end, achieved=achieved)
            )
        return results
