from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import admin_required, error_response
from ..container import Container
from ..core.exceptions import AuthorizationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/bonus", methods=["POST"], endpoint="api_bonus_calculate")
    @admin_required
    def api_bonus_calculate():
        data = request.get_json(silent=True) or {}
        try:
            report = container.bonus_service.calculate_month(
                can_manage=bool(session.get("can_manage")),
                revenue=data.get("revenue"),
                pool_percentage=data.get("pool_percentage"),
                year=data.get("year"),
                month=data.get("month"),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except AuthorizationError as e:
            return error_response(str(e), 403)
        except Exception:
            app.logger.exception("bonus calculation failed")
            return error_response("System error while calculating bonuses", 500)

        return jsonify({"success": True, "report": report.to_dict()}), 200

    @app.route("/api/admin/bonus/policy", methods=["GET"], endpoint="api_bonus_policy")
    @admin_required
    def api_bonus_policy():
        policy = container.policy
        return jsonify(
            {
                "mileage_rate": str(policy.mileage_rate),
                "default_pool_percentage": str(policy.default_pool_percentage),
                "unreported_damage_multiplier": str(policy.unreported_damage_multiplier),
                "tardy_cutoff": policy.tardy_cutoff.strftime("%H:%M"),
                "warehouse_address": policy.warehouse_address,
            }
        )
