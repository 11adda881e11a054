from __future__ import annotations

from typing import Sequence

from ..attendance.model import AttendanceRecord
from ..checklists.definitions import checklist_for_role
from ..checklists.model import ChecklistCompletion


def is_perfect_week(
    attendance: Sequence[AttendanceRecord],
    completions: Sequence[ChecklistCompletion],
) -> bool:
    """A perfect week: worked at least one day, never tardy, always in
    uniform, and every job checklist fully completed."""

    if not attendance:
        return False

    all_on_time = all(not a.is_tardy for a in attendance)
    all_in_uniform = all(a.in_uniform for a in attendance)
    all_checklists_complete = all(
        c.is_complete(len(checklist_for_role(c.role))) for c in completions
    )
    return all_on_time and all_in_uniform and all_checklists_complete
