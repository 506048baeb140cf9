from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT, DEFAULT_PENDING_LIMIT
from ..core.enums import LeaveStatus, LeaveType, ReviewDecision, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .calculator import compute_leave_stats
from .model import LeaveApplication, LeaveStats, StageReview
from .policy import DEFAULT_LEAVE_POLICY, LeavePolicy
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Stage:
    name: str
    pending: LeaveStatus
    on_approve: LeaveStatus
    on_reject: LeaveStatus


# Committee first, then the principal (admin role).
_STAGE_BY_ROLE = {
    Role.COMMITTEE_MEMBER: _Stage(
        name="committee",
        pending=LeaveStatus.PENDING_COMMITTEE,
        on_approve=LeaveStatus.PENDING_PRINCIPAL,
        on_reject=LeaveStatus.REJECTED_BY_COMMITTEE,
    ),
    Role.ADMIN: _Stage(
        name="principal",
        pending=LeaveStatus.PENDING_PRINCIPAL,
        on_approve=LeaveStatus.APPROVED,
        on_reject=LeaveStatus.REJECTED_BY_PRINCIPAL,
    ),
}


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        *,
        policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._policy = policy
        self._clock = clock

    @property
    def policy(self) -> LeavePolicy:
        return self._policy

    def apply(
        self,
        *,
        current_role: Role,
        faculty_id: int,
        faculty_name: str,
        start_date: date,
        end_date: date,
        leave_type: str,
        subject: str,
        description: str,
    ) -> int:
        if current_role != Role.FACULTY:
            raise AuthorizationError("Only faculty members can apply for leave")

        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")

        try:
            kind = LeaveType(leave_type)
        except ValueError:
            raise ValidationError(f"Unknown leave type: {leave_type!r}")

        leave_id = self._leaves.create(
            faculty_id=int(faculty_id),
            faculty_name=require_non_empty(faculty_name, "Faculty name"),
            start_date=start_date,
            end_date=end_date,
            leave_type=kind,
            subject=(subject or "").strip(),
            description=require_non_empty(description, "Description"),
            applied_date=self._clock().date(),
        )
        logger.info("Leave %s submitted by faculty %s (%s..%s)", leave_id, faculty_id, start_date, end_date)
        return leave_id

    def review(
        self,
        *,
        current_role: Role,
        reviewer_name: str,
        leave_id: int,
        decision: ReviewDecision,
        comments: str = "",
    ) -> LeaveStatus:
        stage = _STAGE_BY_ROLE.get(current_role)
        if stage is None:
            raise AuthorizationError("You are not allowed to review leave applications")

        leave = self._leaves.get(leave_id=int(leave_id))
        if not leave:
            raise NotFoundError("Leave application not found")
        if not leave.status.is_pending:
            raise ValidationError(f"Leave application is already {leave.status.value}")
        if leave.status != stage.pending:
            raise ValidationError(f"Leave application is {leave.status.value}, not awaiting {stage.name} review")

        approved = decision == ReviewDecision.APPROVE
        new_status = stage.on_approve if approved else stage.on_reject
        review = StageReview(
            approved=approved,
            reviewed_by=require_non_empty(reviewer_name, "Reviewer name"),
            reviewed_date=self._clock().date(),
            comments=(comments or "").strip() or None,
        )

        ok = self._leaves.record_review(
            leave_id=int(leave_id),
            expected_status=stage.pending,
            new_status=new_status,
            stage=stage.name,
            review=review,
        )
        if not ok:
            raise ValidationError("Leave application was already reviewed")

        logger.info("Leave %s: %s -> %s by %s", leave_id, stage.pending.value, new_status.value, review.reviewed_by)
        return new_status

    def approve(self, *, current_role: Role, reviewer_name: str, leave_id: int, comments: str = "") -> LeaveStatus:
        return self.review(
            current_role=current_role,
            reviewer_name=reviewer_name,
            leave_id=leave_id,
            decision=ReviewDecision.APPROVE,
            comments=comments,
        )

    def reject(self, *, current_role: Role, reviewer_name: str, leave_id: int, comments: str = "") -> LeaveStatus:
        return self.review(
            current_role=current_role,
            reviewer_name=reviewer_name,
            leave_id=leave_id,
            decision=ReviewDecision.REJECT,
            comments=comments,
        )

    def list_pending_for_role(self, current_role: Role) -> Sequence[LeaveApplication]:
        stage = _STAGE_BY_ROLE.get(current_role)
        if stage is None:
            raise AuthorizationError("You are not allowed to review leave applications")
        return self._leaves.list(status=stage.pending, limit=DEFAULT_PENDING_LIMIT)

    def list_for_faculty(self, faculty_id: int) -> Sequence[LeaveApplication]:
        return self._leaves.list(faculty_id=int(faculty_id), limit=DEFAULT_LIST_LIMIT)

    def leave_stats(self, faculty_id: int, *, year: Optional[int] = None) -> LeaveStats:
        approved = self._leaves.list_approved(faculty_id=int(faculty_id))
        if year is None:
            year = self._clock().year
        return compute_leave_stats(approved, year=year, policy=self._policy)
