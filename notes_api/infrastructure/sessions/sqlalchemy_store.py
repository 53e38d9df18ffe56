# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import SessionRecord
from notes_api.domain.auth.ports import SessionStore
from notes_api.infrastructure.db import Database
from notes_api.infrastructure.db.models import SessionToken, as_utc


class SqlAlchemySessionStore(SessionStore):
    def __init__(self, database: Database) -> None:
        self._db = database

    def get(self, handle: str) -> SessionRecord | None:
        with self._db.session_scope() as session:
            row = session.query(SessionToken).filter(SessionToken.token == handle).first()
            if row is None:
                return None
            return SessionRecord(
                user_id=row.user_id,
                issued_at=as_utc(row.issued_at),
                expires_at=as_utc(row.expires_at),
            )

    def set(self, handle: str, record: SessionRecord) -> None:
        with self._db.session_scope() as session:
            session.query(SessionToken).filter(SessionToken.token == handle).delete()
            session.add(
                SessionToken(
                    user_id=record.user_id,
                    token=handle,
                    issued_at=record.issued_at,
                    expires_at=record.expires_at,
                )
            )

    def delete(self, handle: str) -> None:
        with self._db.session_scope() as session:
            session.query(SessionToken).filter(SessionToken.token == handle).delete()
