# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import Principal

from .entities import Note
from .exceptions import NoteNotFoundError


def is_owner(principal: Principal, owner_id: int) -> bool:
    return principal.user_id == owner_id


def ensure_owner(principal: Principal, note: Note | None) -> Note:
    """Return the note if the principal owns it.

    A note owned by someone else fails exactly like a missing one, so callers
    cannot probe for other users' note ids.
    """
    if note is None or not is_owner(principal, note.user_id):
        raise NoteNotFoundError()
    return note
