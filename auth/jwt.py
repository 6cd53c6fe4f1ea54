"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
Nothing is stored server-side: a token is valid while its signature
matches and ``exp`` lies in the future.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from dataclasses import dataclass
from typing import Callable, Optional


class InvalidTokenError(Exception):
    """Raised when a token is malformed, tampered with, or expired."""


@dataclass(frozen=True)
class TokenClaims:
    id: int
    email: str
    issued_at: int
    expires_at: int


class TokenService:
    """Issue and verify signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = 3600,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if not secret:
            raise ValueError("Token secret cannot be empty")
        self._secret = secret.encode()
        self._expiry_seconds = expiry_seconds
        self._clock = clock or time.time

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def create_token(self, user_id: int, email: str) -> str:
        """Create a signed token carrying ``id``, ``email`` and expiry."""
        now = int(self._clock())
        payload = {
            "id": user_id,
            "email": email,
            "iat": now,
            "exp": now + self._expiry_seconds,
        }
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify ``token`` and return its claims.

        Raises ``InvalidTokenError`` on a bad format, a signature
        mismatch, or an expired token.
        """
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise InvalidTokenError("bad format")
        try:
            raw = urlsafe_b64decode(parts[0].encode())
        except (binascii.Error, ValueError) as exc:
            raise InvalidTokenError("bad encoding") from exc

        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            raise InvalidTokenError("bad signature")

        try:
            payload = json.loads(raw)
            claims = TokenClaims(
                id=payload["id"],
                email=payload["email"],
                issued_at=int(payload["iat"]),
                expires_at=int(payload["exp"]),
            )
        except (ValueError, KeyError, TypeError) as exc:
            raise InvalidTokenError("bad payload") from exc

        if self._clock() >= claims.expires_at:
            raise InvalidTokenError("token expired")
        return claims
