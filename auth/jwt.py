"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
The payload carries ``user_id`` and ``iat`` (issue time).  Tokens never
expire: verification only checks structure and signature.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import b64decode, b64encode
from typing import Optional

from utils.errors import InvalidToken


class TokenService:
    """Issues and verifies signed bearer tokens with a shared secret."""

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret.encode()

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, user_id: str) -> str:
        """Create a signed token binding ``user_id``."""
        payload = {"user_id": user_id, "iat": int(time.time())}
        raw = json.dumps(payload).encode()
        return b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: Optional[str]) -> str:
        """
        Verify token and return ``user_id``.

        Raises ``InvalidToken`` when the token is absent, malformed, or
        its signature does not match.
        """
        if not token:
            raise InvalidToken("No token provided")

        parts = token.split(".", 1)
        if len(parts) != 2:
            raise InvalidToken("Invalid token: bad format")
        try:
            raw = b64decode(parts[0], validate=True)
        except (binascii.Error, ValueError):
            raise InvalidToken("Invalid token: bad encoding")

        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            raise InvalidToken("Invalid token: bad signature")

        try:
            payload = json.loads(raw)
        except ValueError:
            raise InvalidToken("Invalid token: bad payload")
        user_id = payload.get("user_id") if isinstance(payload, dict) else None
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken("Invalid token: missing subject")
        return user_id

