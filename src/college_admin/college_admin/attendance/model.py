from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status for one class session. Immutable once marked."""

    record_id: int
    student_id: int
    date: date
    status: AttendanceStatus
    subject: str
    time_slot: str
    faculty_id: int
    faculty_name: str
    class_name: str
    year: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class SessionEntry:
    """Input row when marking a session."""

    student_id: int
    status: AttendanceStatus
    reason: Optional[str] = None


@dataclass(frozen=True)
class MonthlyAttendanceBreakdown:
    year: int
    month: int
    month_name: str
    total_classes: int
    present_count: int
    absent_count: int
    sports_count: int
    ec_count: int
    excused_count: int
    attendance_percentage: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AttendanceSummary:
    total_classes: int
    present_count: int
    absent_count: int
    sports_count: int
    ec_count: int
    excused_count: int
    attendance_percentage: int

    def as_dict(self) -> dict:
        return asdict(self)
