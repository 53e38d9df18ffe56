# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock

from notes_api.domain.auth.entities import SessionRecord
from notes_api.domain.auth.ports import SessionStore


class InMemorySessionStore(SessionStore):
    """Process-local session store; sessions die with the process."""

    def __init__(self) -> None:
        self._records: dict[str, SessionRecord] = {}
        self._lock = Lock()

    def get(self, handle: str) -> SessionRecord | None:
        with self._lock:
            return self._records.get(handle)

    def set(self, handle: str, record: SessionRecord) -> None:
        with self._lock:
            self._records[handle] = record

    def delete(self, handle: str) -> None:
        with self._lock:
            self._records.pop(handle, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
