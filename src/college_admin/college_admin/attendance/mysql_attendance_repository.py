from __future__ import annotations

from datetime import date
from typing import Sequence

from mysql.connector import errorcode, errors

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord, SessionEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def session_exists(self, *, session_date: date, subject: str, time_slot: str, class_name: str, year: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS found
                FROM attendance_records
                WHERE session_date=%s AND subject=%s AND time_slot=%s AND class_name=%s AND year=%s
                LIMIT 1
                """,
                (session_date, subject, time_slot, class_name, year),
            )
            return fetchone(cur) is not None

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
        rows = [
            (
                int(e.student_id),
                session_date,
                e.status.value,
                subject,
                time_slot,
                int(faculty_id),
                faculty_name,
                class_name,
                year,
                e.reason,
            )
            for e in entries
        ]
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.executemany(
                    """
                    INSERT INTO attendance_records(
                        student_id, session_date, status, subject, time_slot,
                        faculty_id, faculty_name, class_name, year, reason
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    rows,
                )
        except errors.IntegrityError as e:
            # The unique session key catches a concurrent marking of the same session.
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise ValidationError("Attendance for this session has already been marked") from e
            if e.errno == errorcode.ER_NO_REFERENCED_ROW_2:
                raise ValidationError("Attendance roster contains an unknown student") from e
            raise
        return len(rows)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, student_id, session_date, status, subject, time_slot,
                       faculty_id, faculty_name, class_name, year, reason
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY session_date DESC, record_id DESC
                """,
                (int(student_id),),
            )
            return [
                AttendanceRecord(
                    record_id=int(r["record_id"]),
                    student_id=int(r["student_id"]),
                    date=normalize_mysql_date(r["session_date"]),
                    status=AttendanceStatus(r["status"]),
                    subject=r["subject"],
                    time_slot=r["time_slot"],
                    faculty_id=int(r["faculty_id"]),
                    faculty_name=r["faculty_name"],
                    class_name=r["class_name"],
                    year=r["year"],
                    reason=r.get("reason"),
                )
                for r in fetchall(cur)
            ]
