"""Settings selection for the presensi client.

``APP_ENV`` picks one of the sibling modules; each reads ``API_BASE_URL``,
``API_TIMEOUT``, ``TOKEN_STORE_PATH`` and ``APP_TIMEZONE`` from the
environment.
"""

import importlib
import os
from types import ModuleType

REQUIRED_SETTINGS = ("SECRET_KEY", "API_CONFIG", "TOKEN_STORE_PATH", "TIMEZONE")


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def load_settings() -> ModuleType:
    """Import the active settings module and check it defines what the container needs."""
    settings = importlib.import_module(get_settings_module())
    missing = [name for name in REQUIRED_SETTINGS if not hasattr(settings, name)]
    if missing:
        raise RuntimeError(f"{settings.__name__} is missing settings: {', '.join(missing)}")
    if not str(settings.API_CONFIG.get("base_url") or "").strip():
        raise RuntimeError(f"{settings.__name__}: API_CONFIG['base_url'] is empty")
    return settings
