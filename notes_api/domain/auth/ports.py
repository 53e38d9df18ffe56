# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import IssuedCredential, SessionRecord


class CredentialIssuer(Protocol):
    def issue(self, user_id: int) -> IssuedCredential: ...


class SessionStore(Protocol):
    """Key-value store for session state; each call must be atomic."""

    def get(self, handle: str) -> SessionRecord | None: ...
    def set(self, handle: str, record: SessionRecord) -> None: ...
    def delete(self, handle: str) -> None: ...
