from __future__ import annotations

from datetime import date, time

from src.staff_ops.staff_ops.attendance.model import AttendanceRecord
from src.staff_ops.staff_ops.checklists.definitions import HELPER_CHECKLIST
from src.staff_ops.staff_ops.checklists.model import ChecklistCompletion
from src.staff_ops.staff_ops.core.enums import ChecklistRole
from src.staff_ops.staff_ops.perfect_weeks.evaluator import is_perfect_week
from src.staff_ops.staff_ops.perfect_weeks.service import PerfectWeekService

WEEK_START = date(2026, 1, 5)
ALL_HELPER_ITEMS = tuple(item.item_id for item in HELPER_CHECKLIST)


def day(employee_id: str, offset: int, *, tardy=False, uniform=True) -> AttendanceRecord:
    work_date = date(2026, 1, 5 + offset)
    return AttendanceRecord(
        attendance_id=f"{employee_id}-{offset}",
        employee_id=employee_id,
        work_date=work_date,
        arrival_time=time(7, 0),
        is_tardy=tardy,
        in_uniform=uniform,
    )


def completion(employee_id: str, items=ALL_HELPER_ITEMS) -> ChecklistCompletion:
    return ChecklistCompletion("c", "j", employee_id, ChecklistRole.HELPER, items)


def test_perfect_week_requires_at_least_one_day():
    assert is_perfect_week([], []) is False


def test_perfect_week_all_rules_met():
    assert is_perfect_week([day("a", 0), day("a", 1)], [completion("a")]) is True


def test_tardy_day_breaks_perfect_week():
    assert is_perfect_week([day("a", 0), day("a", 1, tardy=True)], []) is False


def test_uniform_violation_breaks_perfect_week():
    assert is_perfect_week([day("a", 0, uniform=False)], []) is False


def test_incomplete_checklist_breaks_perfect_week():
    assert is_perfect_week([day("a", 0)], [completion("a"), completion("a", ALL_HELPER_ITEMS[:3])]) is False


class FakeEmployees:
    def __init__(self, employees):
        self._employees = employees

    def list_all(self, *, active_only=False):
        return [e for e in self._employees if e.is_active or not active_only]


class FakeAttendance:
    def __init__(self, records):
        self._records = records

    def list_for_employee_between(self, *, employee_id, start_date, end_date):
        return [r for r in self._records if r.employee_id == employee_id and start_date <= r.work_date <= end_date]


class FakeChecklists:
    def __init__(self, completions):
        self._completions = completions

    def list_for_employee_between(self, *, employee_id, start_date, end_date):
        return [c for c in self._completions if c.employee_id == employee_id]


class FakePerfectWeeks:
    def __init__(self):
        self.recorded = []

    def record(self, *, employee_id, week_start, week_end, achieved):
        self.recorded.append((employee_id, week_start, week_end, achieved))


def test_evaluate_week_records_every_active_employee(make_employee):
    employees = [
        make_employee("a", start=date(2025, 1, 1)),
        make_employee("b", start=date(2025, 1, 1)),
        make_employee("c", start=date(2025, 1, 1)),
        make_employee("gone", start=date(2025, 1, 1), active=False),
    ]
    attendance = [day("a", 0), day("a", 2), day("b", 0), day("b", 1, tardy=True), day("a", 9, tardy=True)]
    weeks_repo = FakePerfectWeeks()
    svc = PerfectWeekService(weeks_repo, FakeAttendance(attendance), FakeChecklists([completion("a")]), FakeEmployees(employees))

    weeks = svc.evaluate_week(week_start=WEEK_START)

    assert [(w.employee_id, w.achieved) for w in weeks] == [("a", True), ("b", False), ("c", False)]
    assert weeks_repo.recorded[0] == ("a", WEEK_START, date(2026, 1, 11), True)
    assert len(weeks_repo.recorded) == 3
