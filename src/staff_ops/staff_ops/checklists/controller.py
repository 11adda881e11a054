from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import error_response, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checklists/<job_id>/toggle", methods=["POST"], endpoint="api_checklist_toggle")
    @login_required
    def api_checklist_toggle(job_id: str):
        data = request.get_json(silent=True) or {}
        try:
            items = container.checklist_service.toggle_item(
                job_id=job_id,
                employee_id=str(session["employee_id"]),
                item_id=str(data.get("item_id", "")),
            )
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            app.logger.exception("checklist update failed")
            return error_response("System error while saving checklist", 500)

        return jsonify({"success": True, "items_completed": list(items)})
