from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.web import admin_required, error_response, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/mileage", methods=["POST"], endpoint="api_mileage_log")
    @login_required
    def api_mileage_log():
        data = request.get_json(silent=True) or {}
        employee_id = str(data.get("employee_id") or session["employee_id"])
        if employee_id != str(session["employee_id"]) and not session.get("can_manage"):
            return error_response("You can only log your own mileage", 403)

        try:
            entry_date = parse_iso_date(str(data.get("date", "")))
        except ValueError:
            return error_response("Invalid date (YYYY-MM-DD)", 400)

        try:
            entry_id = container.mileage_service.log_trip(
                employee_id=employee_id,
                entry_date=entry_date,
                miles=data.get("miles"),
                job_id=data.get("job_id"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("mileage logging failed")
            return error_response("System error while logging mileage", 500)

        return jsonify({"success": True, "entry_id": entry_id}), 201

    @app.route("/api/admin/mileage/summary", methods=["GET"], endpoint="api_mileage_summary")
    @admin_required
    def api_mileage_summary():
        now = now_local()
        try:
            year = int(request.args.get("year", now.year))
            month = int(request.args.get("month", now.month))
            summary = container.mileage_service.month_summary(year=year, month=month)
        except ValueError:
            return error_response("Invalid year/month", 400)

        return jsonify(
            {
                "year": year,
                "month": month,
                "rows": [
                    {
                        "employee_id": s.employee_id,
                        "trips": s.trips,
                        "total_miles": str(s.total_miles),
                        "total_amount": f"{s.total_amount:.2f}",
                    }
                    for s in summary
                ],
            }
        )
