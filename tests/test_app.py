from __future__ import annotations

import pytest

import config
from presensi_client.main import create_app


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert config.get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert config.get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert config.get_settings_module() == "config.development"


def test_create_app_wires_both_lists(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()
    client = app.test_client()

    for kind in ("attendances", "permits"):
        data = client.get(f"/api/{kind}").get_json()
        assert data["kind"] == kind
        assert data["state"] == "idle"
        assert data["filter"] == "all"


def test_load_settings_returns_active_module(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    settings = config.load_settings()

    assert settings.__name__ == "config.testing"
    assert settings.API_CONFIG["base_url"]


def test_load_settings_rejects_incomplete_module(monkeypatch):
    import config.testing

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.delattr(config.testing, "TIMEZONE")

    with pytest.raises(RuntimeError, match="TIMEZONE"):
        config.load_settings()
