"""Attendance aggregation for one student's records.

``sports`` and ``ec`` are excused: they count toward the percentage like
``present``. Only ``absent`` is left out of the numerator.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import month_name
from ..core.constants import ACADEMIC_YEAR_START_MONTH
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary, MonthlyAttendanceBreakdown


def percentage(part: int, total: int) -> int:
    """Whole-number percentage rounded half-up; 0 when ``total`` is 0."""
    if total <= 0:
        return 0
    # Integer form of floor(part / total * 100 + 0.5), free of float error.
    return (part * 200 + total) // (2 * total)


def _counts(records: Sequence[AttendanceRecord]) -> dict:
    by_status = Counter(r.status for r in records)
    present = by_status[AttendanceStatus.PRESENT]
    excused = present + sum(n for status, n in by_status.items() if status.is_excused)
    return {
        "total_classes": len(records),
        "present_count": present,
        "absent_count": by_status[AttendanceStatus.ABSENT],
        "sports_count": by_status[AttendanceStatus.SPORTS],
        "ec_count": by_status[AttendanceStatus.EC],
        "excused_count": excused,
        "attendance_percentage": percentage(excused, len(records)),
    }


def compute_monthly_attendance(records: Iterable[AttendanceRecord]) -> list[MonthlyAttendanceBreakdown]:
    """One entry per (year, month) that has records, most recent month first."""
    groups: dict[tuple[int, int], list[AttendanceRecord]] = defaultdict(list)
    for record in records:
        groups[(record.date.year, record.date.month)].append(record)

    out = [
        MonthlyAttendanceBreakdown(
            year=year,
            month=month,
            month_name=f"{month_name(month)} {year}",
            **_counts(group),
        )
        for (year, month), group in groups.items()
    ]
    out.sort(key=lambda b: (b.year, b.month), reverse=True)
    return out


def summarize_attendance(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    return AttendanceSummary(**_counts(list(records)))


def current_academic_year(today: date) -> str:
    """Academic year label such as ``"2025-2026"``; a new year starts in June."""
    if today.month >= ACADEMIC_YEAR_START_MONTH:
        return f"{today.year}-{today.year + 1}"
    return f"{today.year - 1}-{today.year}"
