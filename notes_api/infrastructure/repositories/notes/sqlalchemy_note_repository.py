# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from notes_api.domain.notes.entities import Note as DomainNote
from notes_api.domain.notes.repositories import NoteRepository
from notes_api.infrastructure.db import Database
from notes_api.infrastructure.db.models import Note, as_utc


def _to_domain(row: Note) -> DomainNote:
    return DomainNote(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        content=row.content,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyNoteRepository(NoteRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def list_for_owner(self, user_id: int) -> Sequence[DomainNote]:
        with self._db.session_scope() as session:
            rows = (
                session.query(Note)
                .filter(Note.user_id == user_id)
                .order_by(Note.created_at.desc(), Note.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def get(self, note_id: int) -> DomainNote | None:
        with self._db.session_scope() as session:
            row = session.get(Note, note_id)
            return _to_domain(row) if row else None

    def add(self, user_id: int, title: str, content: str) -> DomainNote:
        with self._db.session_scope() as session:
            row = Note(user_id=user_id, title=title, content=content)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def update(
        self, note_id: int, owner_id: int, *, title: str | None, content: str | None
    ) -> DomainNote | None:
        with self._db.session_scope() as session:
            row = (
                session.query(Note)
                .filter(Note.id == note_id, Note.user_id == owner_id)
                .first()
            )
            if row is None:
                return None
            if title is not None:
                row.title = title
            if content is not None:
                row.content = content
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def delete(self, note_id: int, owner_id: int) -> bool:
        with self._db.session_scope() as session:
            deleted = (
                session.query(Note)
                .filter(Note.id == note_id, Note.user_id == owner_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0
