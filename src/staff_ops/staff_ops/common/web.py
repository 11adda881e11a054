from __future__ import annotations

from functools import wraps

from flask import jsonify, session


def login_required(view):
    """Session is populated by the external auth layer (``employee_id``, ``can_manage``)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        if not session.get("can_manage"):
            return jsonify({"success": False, "message": "Admins only"}), 403
        return view(*args, **kwargs)

    return wrapper


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status
