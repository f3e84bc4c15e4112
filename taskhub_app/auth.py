"""
Bearer-token authentication for API endpoints.

Provides a helper that extracts the token from the ``Authorization``
header and a decorator that rejects requests without a valid token
before the wrapped view runs.

Key Concepts Demonstrated:
- Decorator pattern for endpoint authentication (``require_auth``)
- Using ``flask.g`` to store request-scoped user identity
- Uniform 401 response for every kind of token failure
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps

from flask import Response, g, request

from . import get_services
from .errors import AuthError

logger = logging.getLogger(__name__)


def extract_bearer_token() -> str | None:
    """
    Extract the Bearer token from the current request's Authorization header.

    Returns:
        The raw token string, or ``None`` if the header is absent,
        malformed, or empty after stripping whitespace.
    """
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def require_auth(view_func: Callable[..., tuple[Response, int] | Response]):
    """
    Decorator that enforces Bearer-token authentication on API endpoints.

    On success the verified claims are stored on ``g.current_user`` so the
    view can stamp ownership without re-parsing the token.  On any
    failure an :class:`~taskhub_app.errors.AuthError` is raised and the
    view is never invoked, so no state is touched.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        claims = get_services().credentials.verify_token(extract_bearer_token())
        if claims is None:
            logger.warning("%s %s - rejected unauthenticated request", request.method, request.path)
            raise AuthError("Unauthorized")

        g.current_user = claims
        return view_func(*args, **kwargs)

    return wrapper
