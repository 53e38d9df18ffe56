# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from notes_api.domain.auth.entities import Principal
from notes_api.domain.notes.entities import Note
from notes_api.domain.notes.repositories import NoteRepository


class ListNotesUseCase:
    def __init__(self, *, notes: NoteRepository) -> None:
        self._notes = notes

    def execute(self, principal: Principal) -> Sequence[Note]:
        return self._notes.list_for_owner(principal.user_id)
