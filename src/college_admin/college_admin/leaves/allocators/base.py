from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import LeaveApplication


def leave_days(leave: LeaveApplication) -> int:
    """Inclusive day count: a leave starting and ending on the same day is 1 day."""
    return (leave.end_date - leave.start_date).days + 1


class MonthAllocator(ABC):
    """Strategy Pattern: decide which months of ``year`` a leave's days fall into."""

    @abstractmethod
    def allocate(self, leave: LeaveApplication, *, year: int) -> dict[int, int]:
        """Return ``{calendar month (1-12): days}``; empty when the leave does not count in ``year``."""
        raise NotImplementedError
