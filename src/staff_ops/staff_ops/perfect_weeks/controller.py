from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/perfect-weeks", methods=["POST"], endpoint="api_perfect_weeks_evaluate")
    @admin_required
    def api_perfect_weeks_evaluate():
        data = request.get_json(silent=True) or {}
        try:
            week_start = parse_iso_date(str(data.get("week_start", "")))
        except ValueError:
            return error_response("Invalid week_start (YYYY-MM-DD)", 400)

        try:
            weeks = container.perfect_week_service.evaluate_week(week_start=week_start)
        except Exception:
            app.logger.exception("perfect week evaluation failed")
            return error_response("System error while evaluating perfect weeks", 500)

        return jsonify(
            {
                "success": True,
                "week_start": week_start.strftime("%Y-%m-%d"),
                "achieved": [w.employee_id for w in weeks if w.achieved],
                "evaluated": len(weeks),
            }
        )
