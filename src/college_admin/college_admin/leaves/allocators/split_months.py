from __future__ import annotations

from datetime import date, timedelta

from ..model import LeaveApplication
from .base import MonthAllocator


class SplitAcrossMonthsAllocator(MonthAllocator):
    """Each day is counted in its own calendar month; days outside ``year`` are ignored."""

    def allocate(self, leave: LeaveApplication, *, year: int) -> dict[int, int]:
        first = max(leave.start_date, date(year, 1, 1))
        last = min(leave.end_date, date(year, 12, 31))

        out: dict[int, int] = {}
        day = first
        while day <= last:
            out[day.month] = out.get(day.month, 0) + 1
            day += timedelta(days=1)
        return out
