from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.session import current_user, error_response, json_body, roles_required
from ..common.validators import require_date
from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import LeaveApplication, StageReview


def _review_to_dict(review: StageReview | None) -> dict | None:
    if review is None:
        return None
    return {
        "approved": review.approved,
        "reviewed_by": review.reviewed_by,
        "reviewed_date": review.reviewed_date.isoformat(),
        "comments": review.comments or "",
    }


def leave_to_dict(leave: LeaveApplication) -> dict:
    return {
        "leave_id": leave.leave_id,
        "faculty_id": leave.faculty_id,
        "faculty_name": leave.faculty_name,
        "start_date": leave.start_date.isoformat(),
        "end_date": leave.end_date.isoformat(),
        "leave_type": leave.leave_type.value,
        "subject": leave.subject,
        "description": leave.description,
        "status": leave.status.value,
        "applied_date": leave.applied_date.isoformat(),
        "committee_review": _review_to_dict(leave.committee_review),
        "principal_review": _review_to_dict(leave.principal_review),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="apply_leave")
    @roles_required(Role.FACULTY)
    def apply_leave():
        data = json_body()
        user = current_user()
        try:
            leave_id = container.leave_service.apply(
                current_role=user.role,
                faculty_id=user.user_id,
                faculty_name=user.name,
                start_date=require_date(data.get("start_date"), "Start date"),
                end_date=require_date(data.get("end_date"), "End date"),
                leave_type=str(data.get("leave_type", "")),
                subject=str(data.get("subject", "")),
                description=str(data.get("description", "")),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "message": "Leave application submitted", "data": {"leave_id": leave_id}}), 201

    @app.route("/api/leaves/mine", methods=["GET"], endpoint="my_leaves")
    @roles_required(Role.FACULTY)
    def my_leaves():
        leaves = container.leave_service.list_for_faculty(current_user().user_id)
        return jsonify({"success": True, "data": [leave_to_dict(x) for x in leaves]})

    @app.route("/api/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    @roles_required(Role.COMMITTEE_MEMBER, Role.ADMIN)
    def pending_leaves():
        try:
            leaves = container.leave_service.list_pending_for_role(current_user().role)
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "data": [leave_to_dict(x) for x in leaves]})

    def _review(leave_id: int, *, approve: bool):
        data = json_body()
        user = current_user()
        action = container.leave_service.approve if approve else container.leave_service.reject
        try:
            status = action(
                current_role=user.role,
                reviewer_name=user.name,
                leave_id=leave_id,
                comments=str(data.get("comments", "")),
            )
        except DomainError as e:
            return error_response(e)
        verb = "approved" if approve else "rejected"
        return jsonify({"success": True, "message": f"Leave application {verb}", "data": {"status": status.value}})

    @app.route("/api/leaves/<int:leave_id>/approve", methods=["POST"], endpoint="approve_leave")
    @roles_required(Role.COMMITTEE_MEMBER, Role.ADMIN)
    def approve_leave(leave_id: int):
        return _review(leave_id, approve=True)

    @app.route("/api/leaves/<int:leave_id>/reject", methods=["POST"], endpoint="reject_leave")
    @roles_required(Role.COMMITTEE_MEMBER, Role.ADMIN)
    def reject_leave(leave_id: int):
        return _review(leave_id, approve=False)

    @app.route("/api/leaves/stats", methods=["GET"], endpoint="leave_stats")
    @roles_required(Role.FACULTY)
    def leave_stats():
        year_arg = request.args.get("year", "").strip()
        try:
            year = None
            if year_arg:
                try:
                    year = int(year_arg)
                except ValueError:
                    raise ValidationError("year must be a number")
            stats = container.leave_service.leave_stats(current_user().user_id, year=year)
        except DomainError as e:
            return error_response(e)

        data = stats.as_dict()
        data["annual_quota"] = container.leave_service.policy.annual_quota
        data["monthly_cap"] = container.leave_service.policy.monthly_cap
        return jsonify({"success": True, "data": data})
