from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class AbsenteeNotice:
    parent_email: str
    student_name: str
    date: str
    subject: str
    faculty_name: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class NotificationResult:
    email: str
    success: bool
    detail: str = ""


class AbsenteeNotifier(Protocol):
    def notify_absentee(self, notice: AbsenteeNotice) -> NotificationResult:
        raise NotImplementedError

    def send_bulk(self, notices: Sequence[AbsenteeNotice]) -> list[NotificationResult]:
        raise NotImplementedError
