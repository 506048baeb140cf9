from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord, SessionEntry


class AttendanceRepository(Protocol):
    def session_exists(self, *, session_date: date, subject: str, time_slot: str, class_name: str, year: str) -> bool:
        raise NotImplementedError

    def create_session(
        self,
        *,
        session_date: date,
        subject: str,
        time_slot: str,
        class_name: str,
        year: str,
        faculty_id: int,
        faculty_name: str,
        entries: Sequence[SessionEntry],
    ) -> int:
        """Insert one record per entry in a single transaction; returns the number stored."""

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError
