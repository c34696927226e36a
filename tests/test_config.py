"""
Tests for environment-driven settings.
"""

import logging

from motopass_seo.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "FACADE_PORT", "ENVIRONMENT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.port == 3000
    assert settings.facade_port == 5000
    assert settings.environment == "development"
    assert settings.is_production is False
    assert settings.cors_origins == ("*",)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT", " Production ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "https://www.motopass.fr, https://www.motopass.be,")
    settings = load_settings()
    assert settings.port == 8080
    assert settings.is_production is True
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("https://www.motopass.fr", "https://www.motopass.be")


def test_production_skips_local_listener(monkeypatch):
    from motopass_seo import main

    monkeypatch.setattr(main, "settings", Settings(environment="production"))
    called = []
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: called.append(args))
    main.run()
    assert called == []


def test_local_listener_logs_startup_urls(monkeypatch, caplog):
    from motopass_seo import main

    monkeypatch.setattr(main, "settings", Settings(port=4321))
    served = []
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: served.append(kwargs))

    with caplog.at_level(logging.INFO, logger="motopass_seo.main"):
        main.run()

    assert served == [{"host": "0.0.0.0", "port": 4321, "log_level": "info"}]
    messages = [record.getMessage() for record in caplog.records]
    assert "Motopass SEO server starting on http://localhost:4321" in messages
    assert "Dashboard: http://localhost:4321/" in messages
    assert "Tools: http://localhost:4321/tools" in messages
