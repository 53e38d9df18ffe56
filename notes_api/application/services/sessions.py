# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from notes_api.domain.auth.entities import IssuedCredential, Principal, SessionRecord
from notes_api.domain.auth.exceptions import SessionNotFoundError
from notes_api.domain.auth.ports import SessionStore
from notes_api.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _fingerprint(handle: str) -> str:
    return hashlib.sha256(handle.encode()).hexdigest()[:8]


class SessionService:
    """Opaque session handles backed by a :class:`SessionStore`."""

    def __init__(
        self,
        *,
        store: SessionStore,
        max_age: timedelta,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._max_age = max_age
        self._clock = clock

    @property
    def max_age(self) -> timedelta:
        return self._max_age

    def issue(self, user_id: int) -> IssuedCredential:
        handle = secrets.token_urlsafe(32)
        now = self._clock()
        record = SessionRecord(user_id=user_id, issued_at=now, expires_at=now + self._max_age)
        self._store.set(handle, record)
        logger.info(
            f"sessions.issue: user={user_id} exp={record.expires_at.isoformat()} "
            f"handle=<hash:{_fingerprint(handle)}>"
        )
        return IssuedCredential(
            value=handle, user_id=user_id, issued_at=now, expires_at=record.expires_at
        )

    def validate(self, credential: str) -> Principal:
        record = self._store.get(credential)
        if record is None:
            raise SessionNotFoundError()

        if record.expires_at <= self._clock():
            self._store.delete(credential)
            logger.info(f"sessions.validate: evicted expired handle=<hash:{_fingerprint(credential)}>")
            raise SessionNotFoundError()

        return Principal(
            user_id=record.user_id,
            strategy="session",
            issued_at=record.issued_at,
            expires_at=record.expires_at,
        )

    def revoke(self, credential: str) -> None:
        if credential:
            self._store.delete(credential)


__all__ = ["SessionService"]
