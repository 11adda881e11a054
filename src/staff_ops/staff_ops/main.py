from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .bonus.controller import register as register_bonus
from .checklists.controller import register as register_checklists
from .container import build_container
from .damages.controller import register as register_damages
from .core.policy import CompanyPolicy
from .mileage.controller import register as register_mileage
from .perfect_weeks.controller import register as register_perfect_weeks
from .performance.controller import register as register_performance


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.logger.setLevel(logging.DEBUG if app.config["DEBUG"] else logging.INFO)

    policy = CompanyPolicy.from_settings(settings)

    if app.config["DEBUG"]:
        app.logger.info(
            "[staff-ops] settings=%s db=%s@%s:%s/%s mileage_rate=%s pool=%s%%",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            policy.mileage_rate,
            policy.default_pool_percentage,
        )

    container = build_container(db_config=db_config, policy=policy)

    register_attendance(app, container)
    register_checklists(app, container)
    register_mileage(app, container)
    register_perfect_weeks(app, container)
    register_damages(app, container)
    register_performance(app, container)
    register_bonus(app, container)

    return app
