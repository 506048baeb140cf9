from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class StageReview:
    """One approval stage's outcome (committee or principal)."""

    approved: bool
    reviewed_by: str
    reviewed_date: date
    comments: Optional[str] = None


@dataclass(frozen=True)
class LeaveApplication:
    """Domain entity: a faculty member's leave application.

    The date range is inclusive; ``end_date >= start_date`` is checked when
    the application is submitted.
    """

    leave_id: int
    faculty_id: int
    faculty_name: str
    start_date: date
    end_date: date
    leave_type: LeaveType
    subject: str
    description: str
    status: LeaveStatus
    applied_date: date
    committee_review: Optional[StageReview] = None
    principal_review: Optional[StageReview] = None


@dataclass(frozen=True)
class MonthlyLeaveUsage:
    month: int
    month_name: str
    total_days: int
    leaves_used: int
    lop_days: int


@dataclass(frozen=True)
class LeaveStats:
    """Read-model: one year's leave usage for one faculty member."""

    year: int
    total_leaves_used: int
    remaining_leaves: int
    total_lop: int
    monthly_breakdown: tuple[MonthlyLeaveUsage, ...] = ()
    counted_leaves: tuple[LeaveApplication, ...] = field(default=(), repr=False)

    def as_dict(self) -> dict:
        return {
            "year": self.year,
            "total_leaves_used": self.total_leaves_used,
            "remaining_leaves": self.remaining_leaves,
            "total_lop": self.total_lop,
            "monthly_breakdown": [
                {
                    "month": m.month,
                    "month_name": m.month_name,
                    "total_days": m.total_days,
                    "leaves_used": m.leaves_used,
                    "lop_days": m.lop_days,
                }
                for m in self.monthly_breakdown
            ],
        }
