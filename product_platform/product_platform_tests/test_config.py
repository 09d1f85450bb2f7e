"""Tests for settings validation."""
import pytest
from pydantic import ValidationError

from product_platform.product_service.config import Settings
from product_platform.product_service.main import create_app


def test_missing_secret_fails_fast(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_secret_fails_fast():
    with pytest.raises(ValidationError):
        Settings(JWT_SECRET="   ", _env_file=None)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "env-secret-key-for-product-service-tests")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

    settings = Settings(_env_file=None)

    assert settings.JWT_SECRET == "env-secret-key-for-product-service-tests"
    assert settings.PORT == 8080
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15


def test_defaults():
    settings = Settings(JWT_SECRET="x" * 32, _env_file=None)
    assert settings.PORT == 3002
    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.DEFAULT_ADMIN_USERNAME == "admin"
    assert settings.is_sqlite


def test_create_app_keeps_explicit_settings(settings):
    app = create_app(settings)
    assert app.state.settings is settings
    assert app.docs_url == "/api-docs"


def test_create_app_configures_logging_when_unset(settings, monkeypatch):
    import logging
    from unittest.mock import Mock
    from product_platform.product_service import main

    configure = Mock()
    monkeypatch.setattr(main, "configure_logging", configure)
    monkeypatch.setattr(logging.getLogger(), "handlers", [])

    main.create_app(settings)

    configure.assert_called_once_with(settings.LOG_LEVEL, settings.LOG_DIR)


def test_create_app_keeps_existing_logging(settings, monkeypatch):
    import logging
    from unittest.mock import Mock
    from product_platform.product_service import main

    configure = Mock()
    monkeypatch.setattr(main, "configure_logging", configure)
    monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])

    main.create_app(settings)

    configure.assert_not_called()
