from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, error_response
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/attendance", methods=["POST"], endpoint="api_attendance_log")
    @admin_required
    def api_attendance_log():
        """Log one employee's arrival for a day; tardiness is derived from the cutoff."""
        data = request.get_json(silent=True) or {}
        try:
            work_date = parse_iso_date(str(data.get("date", "")))
        except ValueError:
            return error_response("Invalid date (YYYY-MM-DD)", 400)

        try:
            attendance_id = container.attendance_service.log_day(
                employee_id=str(data.get("employee_id", "")),
                work_date=work_date,
                arrival_time=str(data.get("arrival_time") or ""),
                in_uniform=bool(data.get("in_uniform", True)),
                notes=str(data.get("notes") or ""),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("attendance logging failed")
            return error_response("System error while logging attendance", 500)

        return jsonify({"success": True, "attendance_id": attendance_id}), 201
