# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import Principal
from notes_api.domain.notes.entities import Note
from notes_api.domain.notes.exceptions import NoteNotFoundError
from notes_api.domain.notes.ownership import ensure_owner
from notes_api.domain.notes.repositories import NoteRepository
from notes_api.shared.errors import ValidationError, empty_fields_error


class UpdateNoteUseCase:
    def __init__(self, *, notes: NoteRepository) -> None:
        self._notes = notes

    def execute(
        self,
        principal: Principal,
        note_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        if title is None and content is None:
            raise ValidationError(code="nothing_to_update")
        if title is not None:
            title = title.strip()
        empty = [
            name
            for name, value in (("title", title), ("content", content))
            if value is not None and not value.strip()
        ]
        if empty:
            raise empty_fields_error(empty)

        ensure_owner(principal, self._notes.get(note_id))
        updated = self._notes.update(
            note_id, principal.user_id, title=title, content=content
        )
        if updated is None:
            raise NoteNotFoundError()
        return updated
