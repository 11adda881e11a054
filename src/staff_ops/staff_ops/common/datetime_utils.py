from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def month_window(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month (both inclusive)."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def whole_months_between(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """Number of completed months from ``start`` to ``end``.

    A month only completes once ``end`` reaches the day-of-month of ``start``.
    Two exceptions complete it early: ``end`` on Feb 28/29, and a single
    month ending on a month end. So a start on Jan 31 has one full month on
    Feb 28 but only two on Apr 30. Negative when ``end`` precedes ``start``.
    """

    start_d = as_date(start)
    end_d = as_date(end)
    if end_d < start_d:
        return -whole_months_between(end_d, start_d)

    months = (end_d.year - start_d.year) * 12 + (end_d.month - start_d.month)
    end_is_month_end = end_d.day == calendar.monthrange(end_d.year, end_d.month)[1]
    if end_d.day < start_d.day:
        late_february = end_d.month == 2 and end_d.day > 27
        if not (late_february or (months == 1 and end_is_month_end)):
            months -= 1
    return months
