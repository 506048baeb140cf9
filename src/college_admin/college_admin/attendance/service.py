from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..notifications.base import AbsenteeNotice, AbsenteeNotifier, NotificationResult
from ..students.catalog import time_slot_labels
from ..students.identifiers import format_student_id_for_display, generate_search_terms, is_valid_student_id
from ..students.model import Student
from ..students.normalization import is_valid_roll_number, normalize_class_name, normalize_roll_number, normalize_year
from ..students.repository import StudentRepository
from .aggregation import compute_monthly_attendance, current_academic_year, summarize_attendance
from .model import AttendanceSummary, MonthlyAttendanceBreakdown, SessionEntry
from .repository import AttendanceRepository
from .thresholds import DEFAULT_THRESHOLDS, AttendanceThresholds, attendance_status_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkSessionResult:
    records_created: int
    absent_count: int
    notifications: tuple[NotificationResult, ...] = ()


@dataclass(frozen=True)
class StudentAttendanceReport:
    student: Student
    academic_year: str
    summary: AttendanceSummary
    status_label: str
    monthly: tuple[MonthlyAttendanceBreakdown, ...]

    def as_dict(self) -> dict:
        return {
            "student": {
                "student_id": self.student.student_id,
                "name": self.student.name,
                "roll_number": format_student_id_for_display(self.student.roll_number),
                "class_name": self.student.class_name,
                "year": self.student.year,
            },
            "academic_year": self.academic_year,
            "summary": self.summary.as_dict(),
            "status_label": self.status_label,
            "monthly": [m.as_dict() for m in self.monthly],
        }


def parse_entries(raw_entries: Iterable[dict]) -> list[SessionEntry]:
    """Turn request payload rows into entries; rejects unknown statuses and bad ids."""
    entries: list[SessionEntry] = []
    if raw_entries is not None and not isinstance(raw_entries, (list, tuple)):
        raise ValidationError("Entries must be a list")
    for raw in raw_entries or []:
        if not isinstance(raw, dict):
            raise ValidationError("Each entry must be an object")
        try:
            student_id = int(raw["student_id"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Each entry needs a numeric student_id")
        try:
            status = AttendanceStatus(str(raw.get("status", "")).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown attendance status for student {student_id}: {raw.get('status')!r}")
        reason = raw.get("reason")
        if reason is not None and not isinstance(reason, str):
            raise ValidationError(f"Reason for student {student_id} must be text")
        reason = (reason or "").strip() or None
        entries.append(SessionEntry(student_id=student_id, status=status, reason=reason))
    return entries


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        notifier: Optional[AbsenteeNotifier] = None,
        *,
        thresholds: AttendanceThresholds = DEFAULT_THRESHOLDS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._students = students
        self._notifier = notifier
        self._thresholds = thresholds
        self._clock = clock

    def mark_session(
        self,
        *,
        current_role: Role,
        faculty_id: int,
        faculty_name: str,
        session_date: date,
        subject: str,
        time_slot: str,
        class_name: str,
        year: str,
        entries: Sequence[SessionEntry],
    ) -> MarkSessionResult:
        if current_role != Role.FACULTY:
            raise AuthorizationError("Only faculty members can mark attendance")

        subject = require_non_empty(subject, "Subject")
        faculty_name = require_non_empty(faculty_name, "Faculty name")
        class_name = normalize_class_name(require_non_empty(class_name, "Class"))
        year = normalize_year(require_non_empty(year, "Year"))
        if time_slot not in time_slot_labels():
            raise ValidationError(f"Unknown time slot: {time_slot!r}")
        if session_date > self._clock().date():
            raise ValidationError("Attendance cannot be marked for a future date")

        if not entries:
            raise ValidationError("No students to mark")
        seen: set[int] = set()
        for e in entries:
            if e.student_id in seen:
                raise ValidationError(f"Student {e.student_id} appears more than once")
            seen.add(e.student_id)

        roster = {s.student_id: s for s in self._students.get_by_ids(sorted(seen))}
        unknown = sorted(seen - roster.keys())
        if unknown:
            raise ValidationError(f"Unknown student id(s): {', '.join(map(str, unknown))}")

        if self._attendance.session_exists(
            session_date=session_date, subject=subject, time_slot=time_slot, class_name=class_name, year=year
        ):
            raise ValidationError("Attendance for this session has already been marked")

        created = self._attendance.create_session(
            session_date=session_date,
            subject=subject,
            time_slot=time_slot,
            class_name=class_name,
            year=year,
            faculty_id=int(faculty_id),
            faculty_name=faculty_name,
            entries=list(entries),
        )
        logger.info("Marked %s records for %s %s %s on %s", created, class_name, year, subject, session_date)

        absentees = [e for e in entries if e.status == AttendanceStatus.ABSENT]
        notifications = self._notify_absentees(
            absentees, roster, session_date=session_date, subject=subject, faculty_name=faculty_name
        )
        return MarkSessionResult(records_created=created, absent_count=len(absentees), notifications=notifications)

    def _notify_absentees(
        self,
        absentees: Sequence[SessionEntry],
        roster: dict[int, Student],
        *,
        session_date: date,
        subject: str,
        faculty_name: str,
    ) -> tuple[NotificationResult, ...]:
        if not absentees or self._notifier is None:
            return ()

        # Fire-and-forget: attendance is already stored, so no failure here may propagate.
        try:
            notices = [
                AbsenteeNotice(
                    parent_email=roster[e.student_id].parent_email,
                    student_name=roster[e.student_id].name,
                    date=session_date.isoformat(),
                    subject=subject,
                    faculty_name=faculty_name,
                    reason=e.reason,
                )
                for e in absentees
                if roster[e.student_id].parent_email
            ]
            results = tuple(self._notifier.send_bulk(notices))
        except Exception:
            logger.exception("Absentee notification failed for session %s %s", subject, session_date)
            return ()

        failed = [r.email for r in results if not r.success]
        if failed:
            logger.warning("Could not notify %d parent(s): %s", len(failed), ", ".join(failed))
        return results

    def status_label(self, percentage: int) -> str:
        return attendance_status_label(percentage, self._thresholds)

    def monthly_breakdown(self, student_id: int) -> list[MonthlyAttendanceBreakdown]:
        return compute_monthly_attendance(self._attendance.list_for_student(int(student_id)))

    def _find_student(self, raw_roll_number: str) -> Optional[Student]:
        if is_valid_student_id(raw_roll_number):
            terms = generate_search_terms(raw_roll_number)
        else:
            # Short legacy roll numbers (e.g. "BCA01") are not valid student ids.
            fallback = normalize_roll_number(raw_roll_number or "")
            terms = [fallback] if is_valid_roll_number(fallback) else []

        for term in terms:
            student = self._students.find_approved_by_roll_number(term)
            if student:
                return student
        return None

    def lookup_by_roll_number(self, raw_roll_number: str) -> StudentAttendanceReport:
        require_non_empty(raw_roll_number, "Roll number")
        student = self._find_student(raw_roll_number)
        if not student:
            raise NotFoundError("Student not found with this USN/Roll Number")

        records = self._attendance.list_for_student(student.student_id)
        summary = summarize_attendance(records)
        return StudentAttendanceReport(
            student=student,
            academic_year=current_academic_year(self._clock().date()),
            summary=summary,
            status_label=attendance_status_label(summary.attendance_percentage, self._thresholds),
            monthly=tuple(compute_monthly_attendance(records)),
        )
