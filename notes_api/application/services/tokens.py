# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens.

Claims are ``user_id``, ``issued_at``, ``expires_at`` (UNIX seconds) and
``issuer``. Tokens are HMAC-signed with the process secret and carry no
server-side state, so they stay valid until ``expires_at``.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from notes_api.domain.auth.entities import IssuedCredential, Principal
from notes_api.domain.auth.exceptions import (
    TokenExpiredError,
    TokenInvalidSignatureError,
    TokenMalformedError,
)

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
_INT_CLAIMS = ("user_id", "issued_at", "expires_at")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService:
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta,
        issuer: str = "notes-api",
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"unsupported token algorithm: {algorithm}")
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._issuer = issuer
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, user_id: int) -> IssuedCredential:
        now = self._clock().replace(microsecond=0)
        expires_at = now + self._ttl
        claims = {
            "user_id": user_id,
            "issued_at": int(now.timestamp()),
            "expires_at": int(expires_at.timestamp()),
            "issuer": self._issuer,
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return IssuedCredential(
            value=token, user_id=user_id, issued_at=now, expires_at=expires_at
        )

    def validate(self, credential: str) -> Principal:
        claims = self._decode(credential)

        if claims.get("issuer") != self._issuer:
            raise TokenMalformedError()

        try:
            issued_at = datetime.fromtimestamp(claims["issued_at"], UTC)
            expires_at = datetime.fromtimestamp(claims["expires_at"], UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise TokenMalformedError() from exc

        if expires_at <= self._clock():
            raise TokenExpiredError()

        return Principal(
            user_id=claims["user_id"],
            strategy="token",
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def _decode(self, credential: str) -> dict[str, Any]:
        try:
            # Only the configured algorithm is accepted; a token naming any
            # other alg (or none at all) never reaches signature checking.
            claims = jwt.decode(credential, self._secret, algorithms=[self._algorithm])
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise TokenInvalidSignatureError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformedError() from exc

        for name in _INT_CLAIMS:
            value = claims.get(name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TokenMalformedError()
        return claims


__all__ = ["HMAC_ALGORITHMS", "JwtTokenService"]
