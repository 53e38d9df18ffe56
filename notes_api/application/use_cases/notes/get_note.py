# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import Principal
from notes_api.domain.notes.entities import Note
from notes_api.domain.notes.ownership import ensure_owner
from notes_api.domain.notes.repositories import NoteRepository


class GetNoteUseCase:
    def __init__(self, *, notes: NoteRepository) -> None:
        self._notes = notes

    def execute(self, principal: Principal, note_id: int) -> Note:
        return ensure_owner(principal, self._notes.get(note_id))
