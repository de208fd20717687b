from __future__ import annotations

from delfis_api.core import config as core_config


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "delfis-api"}


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SECURITY_ENABLED", "true")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.security_enabled is True
        assert set(settings.cors_origins) == {"http://a.test", "http://b.test"}
    finally:
        core_config.get_settings.cache_clear()
