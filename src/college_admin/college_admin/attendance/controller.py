from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.session import current_user, error_response, json_body, roles_required
from ..common.validators import require_date
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..container import Container
from .service import parse_entries


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/sessions", methods=["POST"], endpoint="mark_attendance")
    @roles_required(Role.FACULTY)
    def mark_attendance():
        data = json_body()
        user = current_user()
        try:
            result = container.attendance_service.mark_session(
                current_role=user.role,
                faculty_id=user.user_id,
                faculty_name=user.name,
                session_date=require_date(data.get("date"), "Date"),
                subject=str(data.get("subject", "")),
                time_slot=str(data.get("time_slot", "")),
                class_name=str(data.get("class_name", "")),
                year=str(data.get("year", "")),
                entries=parse_entries(data.get("entries") or []),
            )
        except DomainError as e:
            return error_response(e)

        notified = sum(1 for r in result.notifications if r.success)
        return (
            jsonify(
                {
                    "success": True,
                    "message": f"Attendance marked for {result.records_created} students",
                    "data": {
                        "records_created": result.records_created,
                        "absent_count": result.absent_count,
                        "parents_notified": notified,
                    },
                }
            ),
            201,
        )

    @app.route("/api/students/<int:student_id>/attendance", methods=["GET"], endpoint="student_monthly_attendance")
    @roles_required(Role.FACULTY, Role.COMMITTEE_MEMBER, Role.ADMIN)
    def student_monthly_attendance(student_id: int):
        rows = []
        for month in container.attendance_service.monthly_breakdown(student_id):
            row = month.as_dict()
            row["status_label"] = container.attendance_service.status_label(month.attendance_percentage)
            rows.append(row)
        return jsonify({"success": True, "data": rows})

    # Public: parents look up their child by USN / roll number.
    @app.route("/api/attendance/lookup", methods=["GET"], endpoint="attendance_lookup")
    def attendance_lookup():
        try:
            report = container.attendance_service.lookup_by_roll_number(request.args.get("roll_number", ""))
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "data": report.as_dict()})
