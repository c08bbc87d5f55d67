from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .container import build_container
from .presensi.controller import register as register_presensi

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    api_config = getattr(settings, "API_CONFIG")

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s api=%s", settings.__name__, api_config.get("base_url"))

    container = build_container(
        api_config=api_config,
        token_store_path=getattr(settings, "TOKEN_STORE_PATH"),
        timezone=getattr(settings, "TIMEZONE", None),
    )
    app.extensions["presensi_container"] = container

    register_presensi(app, container)

    return app
