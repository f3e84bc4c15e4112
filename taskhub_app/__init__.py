"""
Flask application factory module.

This module creates and configures the TaskHub application using the
factory pattern.  Every component (flat-file store, credential service,
repositories) is built here from the loaded configuration and attached
to the app, so nothing reads global settings at request time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from flask import Flask, current_app

from config import get_config

from .credentials import CredentialService
from .repositories import ProjectRepository, TaskRepository, UserRepository
from .storage import JsonFileStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

EXTENSION_KEY = "taskhub"


@dataclass
class Services:
    """Components shared by every request of one application instance."""

    store: JsonFileStore
    credentials: CredentialService
    users: UserRepository
    projects: ProjectRepository
    tasks: TaskRepository


def build_services(settings: dict[str, Any]) -> Services:
    """
    Construct the store, credential service and repositories.

    Args:
        settings: Mapping with the ``DATA_DIR``, ``JWT_*`` and
            ``PASSWORD_HASH_METHOD`` keys (normally ``app.config``).
    """
    store = JsonFileStore(settings["DATA_DIR"])
    credentials = CredentialService(
        secret=settings["JWT_SECRET_KEY"],
        token_ttl=timedelta(days=int(settings["JWT_EXPIRY_DAYS"])),
        hash_method=settings["PASSWORD_HASH_METHOD"],
        leeway_seconds=int(settings.get("JWT_CLOCK_SKEW_SECONDS", 30)),
    )
    return Services(
        store=store,
        credentials=credentials,
        users=UserRepository(store),
        projects=ProjectRepository(store),
        tasks=TaskRepository(store),
    )


def get_services() -> Services:
    """Return the components of the application handling this request."""
    return current_app.extensions[EXTENSION_KEY]


def create_app(config_name: str | None = None, config_overrides: dict[str, Any] | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        config_overrides: Settings applied on top of the configuration
                     class, e.g. a temporary ``DATA_DIR`` for tests.

    Returns:
        Configured Flask application instance.
    """
    # Assets come from PUBLIC_DIR only, so Flask's own /static route is disabled
    app = Flask(__name__, instance_relative_config=True, static_folder=None)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if config_overrides:
        app.config.update(config_overrides)

    logger.info("Creating app with config: %s", config_class.__name__)

    app.extensions[EXTENSION_KEY] = build_services(app.config)
    logger.info("Collections stored under %s", app.config["DATA_DIR"])

    # Register blueprints
    from .routes import register_error_handlers
    from .routes.api import api_bp
    from .routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)
    register_error_handlers(app)

    return app
