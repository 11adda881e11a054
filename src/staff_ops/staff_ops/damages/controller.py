from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.web import admin_required, error_response
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/damages", methods=["POST"], endpoint="api_damages_log")
    @admin_required
    def api_damages_log():
        data = request.get_json(silent=True) or {}

        raw_date = data.get("date")
        try:
            logged_on = parse_iso_date(str(raw_date)) if raw_date else now_local().date()
        except ValueError:
            return error_response("Invalid date (YYYY-MM-DD)", 400)

        employee_ids = data.get("employee_ids") or []
        if not isinstance(employee_ids, list):
            return error_response("employee_ids must be a list", 400)

        try:
            damage_id = container.damage_service.log_damage(
                employee_ids=employee_ids,
                description=str(data.get("description") or ""),
                amount=data.get("amount"),
                was_reported=bool(data.get("was_reported", True)),
                logged_on=logged_on,
                job_id=data.get("job_id"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("damage logging failed")
            return error_response("System error while logging damage", 500)

        return jsonify({"success": True, "damage_id": damage_id}), 201
