"""
Routes package for the TaskHub application.

This package contains route blueprints:
- api: JSON endpoints for authentication, projects and tasks
- views: static front-end assets

It also registers the application-wide error handlers that convert
failures into ``{"error": "..."}`` responses.
"""

from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from ..errors import ApiError, StoreError

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _is_api_request() -> bool:
    return request.path.startswith(API_PREFIX)


def register_error_handlers(app: Flask) -> None:
    """Attach the JSON error handlers to *app*."""

    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError) -> tuple[Response, int]:
        """Handle request-level errors raised by views."""
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(StoreError)
    def handle_store_error(error: StoreError) -> tuple[Response, int]:
        """Handle unreadable or unwritable collection files."""
        logger.exception("Storage failure during %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        """Unknown API routes get JSON; missing assets get plain text."""
        if _is_api_request() or request.method != "GET":
            return jsonify({"error": "Route not found"}), 404
        return Response("Not found", status=404, mimetype="text/plain")

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(error: MethodNotAllowed) -> tuple[Response, int]:
        """A known path with an unsupported method is just an unknown route."""
        return jsonify({"error": "Route not found"}), 404

    @app.errorhandler(500)
    def internal_error(error: Exception) -> tuple[Response, int]:
        """Handle 500 Internal Server errors."""
        logger.error("Internal server error: %s", error)
        return jsonify({"error": "Internal server error"}), 500
