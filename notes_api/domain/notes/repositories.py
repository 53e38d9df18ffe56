# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Note


class NoteRepository(Protocol):
    def list_for_owner(self, user_id: int) -> Sequence[Note]: ...
    def get(self, note_id: int) -> Note | None: ...
    def add(self, user_id: int, title: str, content: str) -> Note: ...

    def update(
        self, note_id: int, owner_id: int, *, title: str | None, content: str | None
    ) -> Note | None: ...

    def delete(self, note_id: int, owner_id: int) -> bool: ...
