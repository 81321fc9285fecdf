from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .logging import setup_logging
from .payroll.controller import register as register_payroll
from .persons.controller import register as register_persons
from .seed import seed_demo_data
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))
    logger.debug("settings=%s", settings_module)

    if container is None:
        container = build_container()
        if bool(getattr(settings, "SEED_DEMO_DATA", False)):
            with container.lock:
                seed_demo_data(container.registry)
            logger.info("Demo data ready (%s)", container.registry)

    register_persons(app, container)
    register_sessions(app, container)
    register_payroll(app, container)

    return app
