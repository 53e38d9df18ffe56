# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import Principal
from notes_api.domain.notes.entities import Note
from notes_api.domain.notes.repositories import NoteRepository
from notes_api.shared.errors import empty_fields_error


class CreateNoteUseCase:
    def __init__(self, *, notes: NoteRepository) -> None:
        self._notes = notes

    def execute(self, principal: Principal, title: str, content: str) -> Note:
        title = title.strip()
        empty = [name for name, value in (("title", title), ("content", content)) if not value.strip()]
        if empty:
            raise empty_fields_error(empty)
        return self._notes.add(principal.user_id, title, content)
