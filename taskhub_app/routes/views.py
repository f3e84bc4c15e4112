"""
Static front-end asset routes.

Any GET outside ``/api`` is answered from ``PUBLIC_DIR``; ``/`` maps to
``index.html``.  Missing files get a plain-text 404.

Routes:
    GET  /           - index.html
    GET  /<path>     - file under the public directory
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, abort, current_app, send_from_directory

views_bp = Blueprint("views", __name__)

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".ico": "image/x-icon",
}
DEFAULT_CONTENT_TYPE = "text/plain"


def content_type_for(filename: str) -> str:
    """Map a file name to its Content-Type, defaulting to plain text."""
    _, ext = os.path.splitext(filename)
    return CONTENT_TYPES.get(ext.lower(), DEFAULT_CONTENT_TYPE)


def _is_api_path(filename: str) -> bool:
    return filename.startswith("api")


def _send_public_file(filename: str) -> Response:
    # send_from_directory rejects paths escaping the directory with a 404
    return send_from_directory(
        current_app.config["PUBLIC_DIR"],
        filename,
        mimetype=content_type_for(filename),
    )


@views_bp.route("/", methods=["GET"], provide_automatic_options=False)
def index() -> Response:
    """Serve the front-end entry page."""
    return _send_public_file("index.html")


@views_bp.route("/<path:filename>", methods=["GET"], provide_automatic_options=False)
def static_asset(filename: str) -> Response:
    """Serve *filename* from the public directory."""
    # Same prefix test as the API error handler: /api, /api/..., /apix
    if _is_api_path(filename):
        abort(404)
    return _send_public_file(filename)
