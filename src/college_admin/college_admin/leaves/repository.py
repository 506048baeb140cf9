from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveApplication, StageReview


class LeaveRepository(Protocol):
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
        """Insert with status ``pending_committee_approval`` and return the new id."""

        raise NotImplementedError

    def get(self, *, leave_id: int) -> Optional[LeaveApplication]:
        raise NotImplementedError

    def list(
        self,
        *,
        faculty_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveApplication]:
        """Newest applied first."""

        raise NotImplementedError

    def list_approved(self, *, faculty_id: int) -> Sequence[LeaveApplication]:
        """All approved applications of one faculty member, no limit."""

        raise NotImplementedError

    def record_review(
        self,
        *,
        leave_id: int,
        expected_status: LeaveStatus,
        new_status: LeaveStatus,
        stage: str,
        review: StageReview,
    ) -> bool:
        """Compare-and-set: only updates when the row is still in ``expected_status``."""

        raise NotImplementedError
