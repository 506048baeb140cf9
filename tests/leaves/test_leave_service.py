from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.college_admin.college_admin.core.enums import LeaveStatus, LeaveType, Role
from src.college_admin.college_admin.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.college_admin.college_admin.leaves.model import LeaveApplication
from src.college_admin.college_admin.leaves.service import LeaveService


class FakeLeaveRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, LeaveApplication] = {}

    def create(self, *, faculty_id, faculty_name, start_date, end_date, leave_type, subject, description, applied_date):
        lid = self._next_id
        self._next_id += 1
        self.rows[lid] = LeaveApplication(
            leave_id=lid,
            faculty_id=faculty_id,
            faculty_name=faculty_name,
            start_date=start_date,
            end_date=end_date,
            leave_type=leave_type,
            subject=subject,
            description=description,
            status=LeaveStatus.PENDING_COMMITTEE,
            applied_date=applied_date,
        )
        return lid

    def get(self, *, leave_id):
        return self.rows.get(int(leave_id))

    def list(self, *, faculty_id=None, status=None, limit=200):
        items = [
            r
            for r in self.rows.values()
            if (faculty_id is None or r.faculty_id == faculty_id) and (status is None or r.status == status)
        ]
        items.sort(key=lambda r: (r.applied_date, r.leave_id), reverse=True)
        return items[:limit]

    def list_approved(self, *, faculty_id):
        return [r for r in self.rows.values() if r.faculty_id == faculty_id and r.status == LeaveStatus.APPROVED]

    def record_review(self, *, leave_id, expected_status, new_status, stage, review):
        row = self.rows.get(int(leave_id))
        if not row or row.status != expected_status:
            return False
        self.rows[int(leave_id)] = replace(row, status=new_status, **{f"{stage}_review": review})
        return True


def _clock():
    return datetime(2026, 3, 20, 10, 0, 0)


def _apply(svc: LeaveService, *, start=date(2026, 3, 23), end=date(2026, 3, 24), faculty_id=7) -> int:
    return svc.apply(
        current_role=Role.FACULTY,
        faculty_id=faculty_id,
        faculty_name="R. Rao",
        start_date=start,
        end_date=end,
        leave_type="casual",
        subject="BCA 2nd Year",
        description="Family function",
    )


def test_faculty_application_starts_at_committee_stage():
    repo = FakeLeaveRepo()
    svc = LeaveService(repo, clock=_clock)

    lid = _apply(svc)

    leave = repo.get(leave_id=lid)
    assert leave.status == LeaveStatus.PENDING_COMMITTEE
    assert leave.leave_type == LeaveType.CASUAL
    assert leave.applied_date == date(2026, 3, 20)


def test_end_before_start_is_rejected():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    with pytest.raises(ValidationError):
        _apply(svc, start=date(2026, 3, 24), end=date(2026, 3, 23))


def test_unknown_leave_type_is_rejected():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    with pytest.raises(ValidationError):
        svc.apply(
            current_role=Role.FACULTY,
            faculty_id=7,
            faculty_name="R. Rao",
            start_date=date(2026, 3, 23),
            end_date=date(2026, 3, 23),
            leave_type="sabbatical",
            subject="",
            description="x",
        )


def test_only_faculty_can_apply():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    with pytest.raises(AuthorizationError):
        svc.apply(
            current_role=Role.ADMIN,
            faculty_id=1,
            faculty_name="Principal",
            start_date=date(2026, 3, 23),
            end_date=date(2026, 3, 23),
            leave_type="OD",
            subject="",
            description="x",
        )


def test_committee_then_principal_approval():
    repo = FakeLeaveRepo()
    svc = LeaveService(repo, clock=_clock)
    lid = _apply(svc)

    status = svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee A", leave_id=lid, comments=" ok ")
    assert status == LeaveStatus.PENDING_PRINCIPAL
    assert repo.get(leave_id=lid).committee_review.comments == "ok"

    status = svc.approve(current_role=Role.ADMIN, reviewer_name="Principal", leave_id=lid)
    assert status == LeaveStatus.APPROVED
    leave = repo.get(leave_id=lid)
    assert leave.principal_review.approved is True
    assert leave.principal_review.reviewed_date == date(2026, 3, 20)


def test_principal_cannot_skip_committee():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    lid = _apply(svc)

    with pytest.raises(ValidationError):
        svc.approve(current_role=Role.ADMIN, reviewer_name="Principal", leave_id=lid)


def test_committee_rejection_is_terminal():
    repo = FakeLeaveRepo()
    svc = LeaveService(repo, clock=_clock)
    lid = _apply(svc)

    status = svc.reject(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee A", leave_id=lid)
    assert status == LeaveStatus.REJECTED_BY_COMMITTEE

    with pytest.raises(ValidationError, match="already rejected_by_committee"):
        svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee B", leave_id=lid)


def test_principal_rejection():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    lid = _apply(svc)
    svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee A", leave_id=lid)

    assert svc.reject(current_role=Role.ADMIN, reviewer_name="Principal", leave_id=lid) == LeaveStatus.REJECTED_BY_PRINCIPAL


def test_faculty_cannot_review():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    lid = _apply(svc)
    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.FACULTY, reviewer_name="R. Rao", leave_id=lid)


def test_review_missing_leave():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    with pytest.raises(NotFoundError):
        svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee A", leave_id=99)


def test_pending_queue_depends_on_role():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    first = _apply(svc)
    second = _apply(svc, start=date(2026, 4, 1), end=date(2026, 4, 1))
    svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="Committee A", leave_id=first)

    assert [x.leave_id for x in svc.list_pending_for_role(Role.COMMITTEE_MEMBER)] == [second]
    assert [x.leave_id for x in svc.list_pending_for_role(Role.ADMIN)] == [first]


def test_stats_use_only_approved_leaves_and_clock_year():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)
    approved = _apply(svc, start=date(2026, 3, 2), end=date(2026, 3, 4))
    _apply(svc, start=date(2026, 3, 9), end=date(2026, 3, 9))  # still pending
    svc.approve(current_role=Role.COMMITTEE_MEMBER, reviewer_name="C", leave_id=approved)
    svc.approve(current_role=Role.ADMIN, reviewer_name="P", leave_id=approved)

    stats = svc.leave_stats(7)

    assert stats.year == 2026
    assert stats.total_leaves_used == 2
    assert stats.total_lop == 1
    assert stats.remaining_leaves == 10
    assert svc.leave_stats(7, year=2025).total_leaves_used == 0


def test_explicit_year_zero_is_not_replaced_by_clock_year():
    svc = LeaveService(FakeLeaveRepo(), clock=_clock)

    with pytest.raises(ValidationError):
        svc.leave_stats(7, year=0)
