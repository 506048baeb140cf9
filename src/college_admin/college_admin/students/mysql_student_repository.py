from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .normalization import is_valid_student_data, normalize_email, normalize_phone_number, normalize_student
from .repository import StudentRepository

_COLUMNS = "student_id, name, email, roll_number, class_name, year, parent_email, parent_phone, is_approved"


def _to_model(r: dict) -> Student:
    student = normalize_student(
        Student(
            student_id=int(r["student_id"]),
            name=r["name"],
            email=r.get("email") or "",
            roll_number=r["roll_number"],
            class_name=r.get("class_name") or "",
            year=r.get("year") or "",
            parent_email=normalize_email(r["parent_email"]) if r.get("parent_email") else None,
            parent_phone=normalize_phone_number(r["parent_phone"]) if r.get("parent_phone") else None,
            is_approved=bool(r.get("is_approved")),
        )
    )
    # Logged, not filtered: legacy rows may carry unknown classes.
    is_valid_student_data(student)
    return student


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_ids(self, student_ids: Iterable[int]) -> Sequence[Student]:
        ids = sorted({int(i) for i in student_ids})
        if not ids:
            return []
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id IN ({placeholders})", tuple(ids))
            return [_to_model(r) for r in fetchall(cur)]

    def find_approved_by_roll_number(self, roll_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE roll_number=%s AND is_approved=1 LIMIT 1",
                (roll_number,),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None
