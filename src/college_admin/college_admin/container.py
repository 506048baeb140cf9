from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .attendance.thresholds import AttendanceThresholds
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.policy import LeavePolicy
from .leaves.service import LeaveService
from .notifications.emailjs import EmailJSConfig, EmailJSNotifier
from .students.mysql_student_repository import MySQLStudentRepository


@dataclass(frozen=True)
class Container:
    leave_service: LeaveService
    attendance_service: AttendanceService


def build_container(
    *,
    db_config: dict,
    leave_policy: Optional[dict] = None,
    attendance_thresholds: Optional[dict] = None,
    emailjs: Optional[dict] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    leaves_repo = MySQLLeaveRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    students_repo = MySQLStudentRepository(conn)

    notifier = EmailJSNotifier(EmailJSConfig.from_settings(emailjs))

    leave_service = LeaveService(leaves_repo, policy=LeavePolicy.from_settings(leave_policy))
    attendance_service = AttendanceService(
        attendance_repo,
        students_repo,
        notifier,
        thresholds=AttendanceThresholds.from_settings(attendance_thresholds),
    )

    return Container(
        leave_service=leave_service,
        attendance_service=attendance_service,
    )
