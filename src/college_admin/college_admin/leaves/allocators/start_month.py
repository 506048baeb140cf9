from __future__ import annotations

from ..model import LeaveApplication
from .base import MonthAllocator, leave_days


class StartMonthAllocator(MonthAllocator):
    """Whole leave goes to the month (and year) it starts in, even if it runs into the next month."""

    def allocate(self, leave: LeaveApplication, *, year: int) -> dict[int, int]:
        if leave.start_date.year != year:
            return {}
        return {leave.start_date.month: leave_days(leave)}
