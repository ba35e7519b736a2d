from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .enhancement.client import SuggestionClient
from .holidays.controller import register as register_holidays

_SETTING_NAMES = (
    "WEEKEND_DAYS",
    "FULL_DAY_HOURS",
    "HALF_DAY_HOURS",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_TIMEOUT",
)


def create_app(
    settings_module: Optional[str] = None,
    *,
    suggestion_client: Optional[SuggestionClient] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", 5)) * 1024 * 1024

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger(__name__)

    values = {name: getattr(settings, name) for name in _SETTING_NAMES if hasattr(settings, name)}
    container = build_container(settings=values, suggestion_client=suggestion_client)

    logger.info(
        "[attendance-reconciler] settings=%s weekend=%s ai=%s",
        settings_module,
        values.get("WEEKEND_DAYS"),
        "on" if values.get("GEMINI_API_KEY") else "off",
    )

    register_attendance(app, container)
    register_holidays(app, container)

    return app
