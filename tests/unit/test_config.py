"""
Unit tests for configuration resolution and the application factory.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from taskhub_app import build_services, create_app

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "name, expected",
    [
        ("development", DevelopmentConfig),
        ("testing", TestingConfig),
        ("production", ProductionConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config_resolves_environment(name, expected):
    assert get_config(name) is expected


def test_get_config_defaults_to_flask_env(monkeypatch):
    monkeypatch.setenv("FLASK_ENV", "production")

    assert get_config() is ProductionConfig


def test_token_lifetime_defaults_to_seven_days():
    assert DevelopmentConfig.JWT_EXPIRY_DAYS == 7


def test_create_app_applies_overrides(tmp_path):
    application = create_app("testing", config_overrides={"DATA_DIR": str(tmp_path)})

    services = application.extensions["taskhub"]
    assert application.config["TESTING"] is True
    assert services.store.data_dir == tmp_path


def test_build_services_passes_settings_to_components(tmp_path):
    services = build_services(
        {
            "DATA_DIR": str(tmp_path),
            "JWT_SECRET_KEY": "factory-secret-0123456789abcdef0123456789",
            "JWT_EXPIRY_DAYS": 2,
            "PASSWORD_HASH_METHOD": "pbkdf2:sha256:1000",
            "JWT_CLOCK_SKEW_SECONDS": 5,
        }
    )

    assert services.credentials.token_ttl == timedelta(days=2)
    assert services.credentials.leeway_seconds == 5
    assert services.users.store is services.store
    assert services.projects.store is services.tasks.store
