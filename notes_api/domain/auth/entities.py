# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

Strategy = Literal["token", "session"]


@dataclass(slots=True, frozen=True)
class Principal:
    """Identity attached to a request once its credential checks out."""

    user_id: int
    strategy: Strategy
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedCredential:
    """A freshly minted bearer token or session handle."""

    value: str
    user_id: int
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class SessionRecord:

    user_id: int
    issued_at: datetime
    expires_at: datetime
