"""Leave quota and loss-of-pay (LOP) calculation.

Every leave day of the year lands in exactly one bucket: up to
``monthly_cap`` days per month count as ordinary leave, anything above is
LOP. ``remaining_leaves`` is the annual quota minus ordinary days, floored at
zero. Callers pass only ``approved`` applications for a single faculty
member; the reference year must be a calendar year between 1 and 9999.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR
from typing import Iterable, Optional

from ..common.datetime_utils import month_name
from ..common.validators import require_int_range
from .allocators.base import MonthAllocator
from .allocators.split_months import SplitAcrossMonthsAllocator
from .allocators.start_month import StartMonthAllocator
from .model import LeaveApplication, LeaveStats, MonthlyLeaveUsage
from .policy import DEFAULT_LEAVE_POLICY, LeavePolicy


def allocator_for(policy: LeavePolicy) -> MonthAllocator:
    if policy.split_across_months:
        return SplitAcrossMonthsAllocator()
    return StartMonthAllocator()


def compute_leave_stats(
    approved_leaves: Iterable[LeaveApplication],
    *,
    year: int,
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
    allocator: Optional[MonthAllocator] = None,
) -> LeaveStats:
    require_int_range(year, "year", minimum=MINYEAR, maximum=MAXYEAR)
    allocator = allocator or allocator_for(policy)

    days_by_month = [0] * 13
    counted: list[LeaveApplication] = []
    for leave in approved_leaves:
        allocation = allocator.allocate(leave, year=year)
        if not allocation:
            continue
        counted.append(leave)
        for month, days in allocation.items():
            days_by_month[month] += days

    breakdown: list[MonthlyLeaveUsage] = []
    for month in range(1, 13):
        total = days_by_month[month]
        if total <= 0:
            continue
        breakdown.append(
            MonthlyLeaveUsage(
                month=month,
                month_name=month_name(month),
                total_days=total,
                leaves_used=min(total, policy.monthly_cap),
                lop_days=max(0, total - policy.monthly_cap),
            )
        )

    total_used = sum(m.leaves_used for m in breakdown)
    return LeaveStats(
        year=year,
        total_leaves_used=total_used,
        remaining_leaves=max(0, policy.annual_quota - total_used),
        total_lop=sum(m.lop_days for m in breakdown),
        monthly_breakdown=tuple(breakdown),
        counted_leaves=tuple(counted),
    )
