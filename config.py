"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults and handed to each
component explicitly by the application factory.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")

    # Shared secret used to sign and verify bearer tokens (HS256)
    JWT_SECRET_KEY: str = os.environ.get("JWT_SECRET", "secret")
    # How many days a newly issued token remains valid before expiring
    JWT_EXPIRY_DAYS: int = int(os.environ.get("JWT_EXPIRY_DAYS", "7"))
    # Seconds of tolerance for clock differences between issuer and verifier
    JWT_CLOCK_SKEW_SECONDS: int = int(os.environ.get("JWT_CLOCK_SKEW_SECONDS", "30"))

    # Werkzeug hash method string; the iteration count is the work factor
    PASSWORD_HASH_METHOD: str = os.environ.get("PASSWORD_HASH_METHOD", "pbkdf2:sha256:600000")

    # Flat JSON collections (users.json, projects.json, tasks.json)
    DATA_DIR: str = os.environ.get("DATA_DIR", str(BASE_DIR / "data"))
    # Front-end assets served for GET requests outside /api
    PUBLIC_DIR: str = os.environ.get("PUBLIC_DIR", str(BASE_DIR / "public"))

    PORT: int = int(os.environ.get("PORT", "4000"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Separate data directory so test runs never touch development data
    DATA_DIR: str = os.environ.get("TEST_DATA_DIR", str(BASE_DIR / "instance" / "test_data"))
    JWT_SECRET_KEY: str = os.environ.get(
        "TEST_JWT_SECRET_KEY", "test-jwt-secret-key-for-local-tests-123456"
    )

    # Cheap hashing keeps the suite fast; production keeps the expensive default
    PASSWORD_HASH_METHOD: str = "pbkdf2:sha256:1000"


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
