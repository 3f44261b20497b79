from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging
from .container import Container, build_container
from .database.bootstrap import describe_storage, ensure_storage
from .meetings.controller import register as register_meetings

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Settings come from the module picked by ``APP_ENV``. Tests pass a ready
    ``container`` to skip storage wiring.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        storage_config = getattr(settings, "STORAGE_CONFIG")
        logger.info("settings=%s storage=%s", settings_module, describe_storage(storage_config))
        container = build_container(
            storage_config=storage_config,
            default_agenda=getattr(settings, "DEFAULT_AGENDA"),
            auto_create_meeting=bool(getattr(settings, "AUTO_CREATE_MEETING", True)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_storage(container)

    app.extensions["club_attendance"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "backend": container.backend})

    register_meetings(app, container)
    register_attendance(app, container)

    return app
