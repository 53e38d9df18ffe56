# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Note:

    id: int
    user_id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
