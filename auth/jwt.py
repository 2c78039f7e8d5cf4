"""
JWT token creation and verification.

Tokens are HS256 JWTs carrying the user's ``email`` plus ``iat``/``exp``
claims. The secret is handed in by the app factory from
``Settings.jwt_secret`` (env var: ``JWT_SECRET``) and must stay stable
across restarts, otherwise every issued token stops verifying.
"""

from __future__ import annotations

import time
from typing import Callable

import jwt


class TokenError(Exception):
    """Base class for every reason a token is rejected."""

    kind = "invalid"


class TokenMalformed(TokenError):
    kind = "malformed"


class TokenSignatureInvalid(TokenError):
    kind = "signature_invalid"


class TokenExpired(TokenError):
    kind = "expired"


class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(
        self,
        secret: str,
        *,
        expiry_seconds: int = 604800,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._expiry_seconds = expiry_seconds
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, email: str) -> str:
        """Create a signed token for ``email`` expiring ``expiry_seconds`` from now."""
        now = int(self._clock())
        payload = {
            "email": email,
            "iat": now,
            "exp": now + self._expiry_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Verify token and return the ``email`` it was issued for.

        Raises ``TokenExpired``, ``TokenSignatureInvalid`` or
        ``TokenMalformed``.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "email"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired(str(exc)) from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenSignatureInvalid(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformed(str(exc)) from exc

        email = payload["email"]
        if not isinstance(email, str) or not email:
            raise TokenMalformed("email claim must be a non-empty string")
        return email
