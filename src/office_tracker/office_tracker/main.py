from __future__ import annotations

from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .app_settings.controller import register as register_app_settings
from .attendance.controller import register as register_attendance
from .common.logging_utils import setup_logger
from .container import Container, build_container
from .database.bootstrap import seed_defaults
from .progress.controller import register as register_progress
from .quarters.controller import register as register_quarters


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    """Application factory.

    ``container`` lets callers (tests) inject a pre-built store; otherwise a
    fresh in-memory one is wired from the settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = load_settings(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["FISCAL_POLICY"] = getattr(settings, "FISCAL_POLICY", "calendar")
    app.config["OFFICE_TARGET_RATIO"] = float(getattr(settings, "OFFICE_TARGET_RATIO", 0.5))

    logger = setup_logger(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
    )
    logger.debug("settings=%s policy=%s", settings_module, app.config["FISCAL_POLICY"])

    if container is None:
        container = build_container(
            fiscal_policy=app.config["FISCAL_POLICY"],
            target_ratio=app.config["OFFICE_TARGET_RATIO"],
        )
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            quarter = seed_defaults(container, quarter=getattr(settings, "DEFAULT_QUARTER", None))
            logger.info("Default settings ready for %s", quarter)

    register_attendance(app, container)
    register_quarters(app, container)
    register_app_settings(app, container)
    register_progress(app, container)

    return app
