from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.api_response import register_error_handlers
from .common.logging import configure_logging
from .container import Container, build_container
from .employees.controller import register as register_employees
from .health.controller import register as register_health
from .qr.controller import register as register_qr
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "text"))

    if container is None:
        container = build_container(
            odoo_config=getattr(settings, "ODOO_CONFIG"),
            public_url=getattr(settings, "PUBLIC_URL", ""),
            qr_token=getattr(settings, "QR_TOKEN"),
            version=getattr(settings, "APP_VERSION", "0.0.0"),
        )
    app.extensions["qr_attendance"] = container

    register_error_handlers(app)
    register_attendance(app, container)
    register_employees(app, container)
    register_timesheets(app, container)
    register_qr(app, container)
    register_health(app, container)

    logger.info("QR attendance API ready (settings=%s)", settings_module)
    return app
