"""
Password hashing and bearer-token handling.

Passwords are hashed with Werkzeug's salted PBKDF2 implementation; the
method string (for example ``pbkdf2:sha256:600000``) carries the
iteration count, so the work factor is tuned from configuration.

Tokens are HS256 JSON Web Tokens signed with a server-held secret.

Token structure (claims):
    - ``id``    -- identifier of the authenticated user.
    - ``name``  -- display name, carried so clients can greet the user
      without another request.
    - ``email`` -- login email of the user.
    - ``iat``   -- *issued-at* timestamp (UTC epoch seconds).
    - ``exp``   -- *expiration* timestamp (UTC epoch seconds).

Tokens are stateless: nothing is stored server-side and there is no
revocation.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"
IDENTITY_CLAIMS = ["id", "name", "email"]
REQUIRED_TOKEN_CLAIMS = IDENTITY_CLAIMS + ["iat", "exp"]


class CredentialService:
    """
    Hash/verify passwords and issue/verify identity tokens.

    Args:
        secret: Server-held key used to sign and verify tokens.
        token_ttl: Lifetime of newly issued tokens.
        hash_method: Werkzeug password-hash method string.
        leeway_seconds: Clock-skew tolerance applied when checking ``exp``.
    """

    def __init__(
        self,
        secret: str,
        token_ttl: timedelta = timedelta(days=7),
        hash_method: str = "pbkdf2:sha256:600000",
        leeway_seconds: int = 30,
    ) -> None:
        if not secret:
            raise ValueError("secret must be a non-empty string")
        self.secret = secret
        self.token_ttl = token_ttl
        self.hash_method = hash_method
        self.leeway_seconds = leeway_seconds

    def hash_password(self, password: str) -> str:
        """Return a salted one-way hash of *password*."""
        return generate_password_hash(password, method=self.hash_method)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Check a plain-text password against a stored hash.

        Returns ``False`` for a wrong password and for a hash that cannot
        be parsed; never raises for either.
        """
        if not isinstance(password, str) or not isinstance(password_hash, str):
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # Unknown hash method in a hand-edited users file
            return False

    def issue_token(self, claims: dict[str, Any]) -> str:
        """
        Sign a token embedding *claims* plus ``iat`` and ``exp``.

        Args:
            claims: Identity claims; must include ``id``, ``name`` and
                ``email``.

        Returns:
            A compact JWS string suitable for an ``Authorization: Bearer``
            header.

        Raises:
            ValueError: If an identity claim is missing.
        """
        missing = [claim for claim in IDENTITY_CLAIMS if claims.get(claim) in (None, "")]
        if missing:
            raise ValueError(f"Missing identity claims: {', '.join(missing)}")

        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = dict(claims)
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int((now + self.token_ttl).timestamp())
        return jwt.encode(payload, self.secret, algorithm=TOKEN_ALGORITHM)

    def verify_token(self, token: str | None) -> dict[str, Any] | None:
        """
        Decode *token* and return its claims if it is valid.

        Valid means: correctly signed with this service's secret, not
        expired, and carrying every required claim.  Any failure yields
        ``None`` so callers can treat it uniformly as "no session".
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": REQUIRED_TOKEN_CLAIMS},
                leeway=self.leeway_seconds,
            )
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected bearer token: %s", exc)
            return None

        if any(payload.get(claim) in (None, "") for claim in IDENTITY_CLAIMS):
            return None
        return payload
