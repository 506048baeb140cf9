from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, where_clause
from .model import LeaveApplication, StageReview
from .repository import LeaveRepository

_STAGES = {"committee", "principal"}

_COLUMNS = """
    leave_id, faculty_id, faculty_name, start_date, end_date, leave_type,
    subject, description, status, applied_date,
    committee_approved, committee_reviewed_by, committee_reviewed_date, committee_comments,
    principal_approved, principal_reviewed_by, principal_reviewed_date, principal_comments
"""


def _review(r: dict, stage: str) -> Optional[StageReview]:
    if r.get(f"{stage}_approved") is None:
        return None
    return StageReview(
        approved=bool(r[f"{stage}_approved"]),
        reviewed_by=r.get(f"{stage}_reviewed_by") or "",
        reviewed_date=normalize_mysql_date(r.get(f"{stage}_reviewed_date")),
        comments=r.get(f"{stage}_comments"),
    )


def _to_model(r: dict) -> LeaveApplication:
    return LeaveApplication(
        leave_id=int(r["leave_id"]),
        faculty_id=int(r["faculty_id"]),
        faculty_name=r["faculty_name"],
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        leave_type=LeaveType(r["leave_type"]),
        subject=r.get("subject") or "",
        description=r.get("description") or "",
        status=LeaveStatus(r["status"]),
        applied_date=normalize_mysql_date(r["applied_date"]),
        committee_review=_review(r, "committee"),
        principal_review=_review(r, "principal"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        faculty_id: int,
        faculty_name: str,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        subject: str,
        description: str,
        applied_date: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_applications(
                    faculty_id, faculty_name, start_date, end_date, leave_type,
                    subject, description, status, applied_date
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(faculty_id),
                    faculty_name,
                    start_date,
                    end_date,
                    leave_type.value,
                    subject,
                    description,
                    LeaveStatus.PENDING_COMMITTEE.value,
                    applied_date,
                ),
            )
            return int(cur.lastrowid)

    def get(self, *, leave_id: int) -> Optional[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_applications WHERE leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def list(
        self,
        *,
        faculty_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveApplication]:
        where, params = where_clause(
            {
                "faculty_id": int(faculty_id) if faculty_id is not None else None,
                "status": status.value if status is not None else None,
            }
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_applications
                WHERE {where}
                ORDER BY applied_date DESC, leave_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def list_approved(self, *, faculty_id: int) -> Sequence[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_applications
                WHERE faculty_id=%s AND status=%s
                ORDER BY start_date
                """,
                (int(faculty_id), LeaveStatus.APPROVED.value),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def record_review(
        self,
        *,
        leave_id: int,
        expected_status: LeaveStatus,
        new_status: LeaveStatus,
        stage: str,
        review: StageReview,
    ) -> bool:
        if stage not in _STAGES:
            raise ValueError(f"Unknown review stage: {stage!r}")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE leave_applications
                SET status=%s,
                    {stage}_approved=%s, {stage}_reviewed_by=%s,
                    {stage}_reviewed_date=%s, {stage}_comments=%s
                WHERE leave_id=%s AND status=%s
                """,
                (
                    new_status.value,
                    1 if review.approved else 0,
                    review.reviewed_by,
                    review.reviewed_date,
                    review.comments,
                    int(leave_id),
                    expected_status.value,
                ),
            )
            return cur.rowcount > 0
