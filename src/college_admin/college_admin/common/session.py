from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError


@dataclass(frozen=True)
class SessionUser:
    """Caller identity placed in the Flask session by the login system."""

    user_id: int
    name: str
    role: Role


def current_user() -> SessionUser:
    return SessionUser(
        user_id=int(session["user_id"]),
        name=str(session.get("name", "")),
        role=Role(session["role"]),
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or "role" not in session:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if session.get("role") not in allowed:
                return jsonify({"success": False, "message": "You do not have permission"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    """Request JSON object; anything else (missing, malformed, a list) reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(exc: DomainError):
    if isinstance(exc, NotFoundError):
        status = 404
    elif isinstance(exc, AuthorizationError):
        status = 403
    else:
        status = 400
    return jsonify({"success": False, "message": str(exc)}), status
