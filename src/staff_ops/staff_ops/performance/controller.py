from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.web import admin_required, error_response
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/performance", methods=["POST"], endpoint="api_performance_log")
    @admin_required
    def api_performance_log():
        data = request.get_json(silent=True) or {}

        raw_date = data.get("date")
        try:
            event_date = parse_iso_date(str(raw_date)) if raw_date else now_local().date()
        except ValueError:
            return error_response("Invalid date (YYYY-MM-DD)", 400)

        try:
            event_id = container.performance_service.log_event(
                employee_id=str(data.get("employee_id") or ""),
                event_type=data.get("event_type"),
                event_date=event_date,
                description=data.get("description"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("performance event logging failed")
            return error_response("System error while logging performance event", 500)

        return jsonify({"success": True, "event_id": event_id}), 201
