from __future__ import annotations

from datetime import date

import pytest

from src.college_admin.college_admin.core.enums import LeaveStatus, LeaveType
from src.college_admin.college_admin.core.exceptions import ValidationError
from src.college_admin.college_admin.leaves.allocators.base import leave_days
from src.college_admin.college_admin.leaves.calculator import compute_leave_stats
from src.college_admin.college_admin.leaves.model import LeaveApplication
from src.college_admin.college_admin.leaves.policy import LeavePolicy

SPLIT = LeavePolicy(split_across_months=True)


def _leave(start: date, end: date, leave_id: int = 1) -> LeaveApplication:
    return LeaveApplication(
        leave_id=leave_id,
        faculty_id=7,
        faculty_name="R. Rao",
        start_date=start,
        end_date=end,
        leave_type=LeaveType.CASUAL,
        subject="BCA",
        description="personal",
        status=LeaveStatus.APPROVED,
        applied_date=start,
    )


def test_single_day_leave_counts_one_day():
    assert leave_days(_leave(date(2026, 4, 9), date(2026, 4, 9))) == 1
    assert leave_days(_leave(date(2026, 4, 9), date(2026, 4, 11))) == 3


def test_no_leaves_gives_full_quota():
    stats = compute_leave_stats([], year=2026)

    assert stats.total_leaves_used == 0
    assert stats.remaining_leaves == 12
    assert stats.total_lop == 0
    assert stats.monthly_breakdown == ()


def test_month_over_cap_becomes_lop():
    stats = compute_leave_stats([_leave(date(2026, 5, 4), date(2026, 5, 8))], year=2026)

    (may,) = stats.monthly_breakdown
    assert may.month == 5
    assert may.month_name == "May"
    assert may.total_days == 5
    assert may.leaves_used == 2
    assert may.lop_days == 3


def test_january_and_march_scenario():
    leaves = [
        _leave(date(2026, 1, 2), date(2026, 1, 3), 1),
        _leave(date(2026, 1, 10), date(2026, 1, 10), 2),
        _leave(date(2026, 3, 5), date(2026, 3, 7), 3),
    ]

    stats = compute_leave_stats(leaves, year=2026)

    jan, mar = stats.monthly_breakdown
    assert (jan.month, jan.total_days, jan.leaves_used, jan.lop_days) == (1, 3, 2, 1)
    assert (mar.month, mar.total_days, mar.leaves_used, mar.lop_days) == (3, 3, 2, 1)
    assert stats.total_leaves_used == 4
    assert stats.total_lop == 2
    assert stats.remaining_leaves == 8


def test_every_day_is_either_used_or_lop():
    leaves = [
        _leave(date(2026, 2, 2), date(2026, 2, 2), 1),
        _leave(date(2026, 2, 16), date(2026, 2, 20), 2),
        _leave(date(2026, 6, 1), date(2026, 6, 2), 3),
        _leave(date(2026, 9, 7), date(2026, 9, 13), 4),
        _leave(date(2026, 11, 30), date(2026, 12, 2), 5),
    ]

    for policy in (LeavePolicy(), SPLIT):
        stats = compute_leave_stats(leaves, year=2026, policy=policy)
        assert stats.total_leaves_used + stats.total_lop == sum(leave_days(x) for x in leaves)


def test_remaining_never_negative():
    leaves = [_leave(date(2026, m, 1), date(2026, m, 2), m) for m in range(1, 13)]

    stats = compute_leave_stats(leaves, year=2026)

    assert stats.total_leaves_used == 24
    assert stats.remaining_leaves == 0
    assert stats.total_lop == 0


def test_only_reference_year_counts():
    leaves = [
        _leave(date(2025, 8, 4), date(2025, 8, 6), 1),
        _leave(date(2026, 8, 4), date(2026, 8, 4), 2),
    ]

    stats = compute_leave_stats(leaves, year=2026)

    assert stats.year == 2026
    assert stats.total_leaves_used == 1
    assert [x.leave_id for x in stats.counted_leaves] == [2]


def test_leave_crossing_month_goes_to_start_month_by_default():
    stats = compute_leave_stats([_leave(date(2026, 1, 30), date(2026, 2, 2))], year=2026)

    (jan,) = stats.monthly_breakdown
    assert jan.month == 1
    assert jan.total_days == 4
    assert jan.leaves_used == 2
    assert jan.lop_days == 2


def test_leave_crossing_month_split_when_configured():
    stats = compute_leave_stats([_leave(date(2026, 1, 30), date(2026, 2, 2))], year=2026, policy=SPLIT)

    jan, feb = stats.monthly_breakdown
    assert (jan.month, jan.total_days) == (1, 2)
    assert (feb.month, feb.total_days) == (2, 2)
    assert stats.total_leaves_used == 4
    assert stats.total_lop == 0


def test_leave_crossing_year_boundary():
    leave = _leave(date(2025, 12, 30), date(2026, 1, 2))

    assert compute_leave_stats([leave], year=2026).total_leaves_used == 0
    assert compute_leave_stats([leave], year=2025).monthly_breakdown[0].total_days == 4

    split_2026 = compute_leave_stats([leave], year=2026, policy=SPLIT)
    assert split_2026.monthly_breakdown[0].total_days == 2
    split_2025 = compute_leave_stats([leave], year=2025, policy=SPLIT)
    assert split_2025.monthly_breakdown[0].total_days == 2


def test_custom_policy_limits():
    policy = LeavePolicy(annual_quota=20, monthly_cap=3)
    stats = compute_leave_stats([_leave(date(2026, 7, 1), date(2026, 7, 5))], year=2026, policy=policy)

    assert stats.total_leaves_used == 3
    assert stats.total_lop == 2
    assert stats.remaining_leaves == 17


def test_policy_rejects_negative_values():
    with pytest.raises(ValidationError):
        LeavePolicy(monthly_cap=-1)
    with pytest.raises(ValidationError):
        LeavePolicy(annual_quota=-5)


def test_policy_from_settings():
    policy = LeavePolicy.from_settings({"annual_quota": "15", "split_across_months": True})

    assert policy.annual_quota == 15
    assert policy.monthly_cap == 2
    assert policy.split_across_months is True


@pytest.mark.parametrize("year", [0, 10000])
def test_reference_year_must_be_a_calendar_year(year):
    leaves = [_leave(date(2026, 12, 30), date(2027, 1, 2))]

    with pytest.raises(ValidationError):
        compute_leave_stats(leaves, year=year, policy=SPLIT)


def test_split_rule_handles_last_calendar_year():
    stats = compute_leave_stats([_leave(date(9999, 12, 30), date(9999, 12, 31))], year=9999, policy=SPLIT)

    assert stats.total_leaves_used == 2
