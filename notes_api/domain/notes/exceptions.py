# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.shared.errors.base import NotFoundError


class NoteNotFoundError(NotFoundError):
    code = "note_not_found"
