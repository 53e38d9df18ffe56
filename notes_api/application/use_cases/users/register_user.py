# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from notes_api.domain.users.entities import User
from notes_api.domain.users.exceptions import UserAlreadyExistsError
from notes_api.domain.users.repositories import PasswordHasher, UserRepository
from notes_api.shared.errors import empty_fields_error
from notes_api.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> User:
        username = username.strip()
        email = email.strip()
        empty = [
            name
            for name, value in (("username", username), ("email", email), ("password", password))
            if not value
        ]
        if empty:
            raise empty_fields_error(empty)

        if self._users.find_by_username(username) or self._users.find_by_email(email):
            logger.info(f"auth.register: duplicate identity username={username}")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        return self._users.add(user)
