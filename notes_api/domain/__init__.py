# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth.entities import IssuedCredential, Principal, SessionRecord
from .notes.entities import Note
from .notes.ownership import ensure_owner, is_owner
from .users.entities import User

__all__ = [
    "IssuedCredential",
    "Note",
    "Principal",
    "SessionRecord",
    "User",
    "ensure_owner",
    "is_owner",
]
