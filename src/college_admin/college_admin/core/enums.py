from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles stored in the session by the login system."""

    ADMIN = "admin"  # principal
    COMMITTEE_MEMBER = "committee_member"
    FACULTY = "faculty"


class AttendanceStatus(str, Enum):
    """Status of one student for one class session."""

    PRESENT = "present"
    ABSENT = "absent"
    SPORTS = "sports"
    EC = "ec"  # extra-curricular

    @property
    def is_excused(self) -> bool:
        return self in (AttendanceStatus.SPORTS, AttendanceStatus.EC)


class LeaveStatus(str, Enum):
    """Leave approval workflow stages: committee, then principal."""

    PENDING_COMMITTEE = "pending_committee_approval"
    PENDING_PRINCIPAL = "pending_principal_approval"
    APPROVED = "approved"
    REJECTED_BY_COMMITTEE = "rejected_by_committee"
    REJECTED_BY_PRINCIPAL = "rejected_by_principal"

    @property
    def is_pending(self) -> bool:
        return self in (LeaveStatus.PENDING_COMMITTEE, LeaveStatus.PENDING_PRINCIPAL)


class LeaveType(str, Enum):
    OD = "OD"
    CASUAL = "casual"


class ReviewDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
