# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notes_api.domain.auth.entities import IssuedCredential
from notes_api.domain.auth.ports import CredentialIssuer
from notes_api.domain.users.exceptions import UnknownUserError, WrongPasswordError
from notes_api.domain.users.repositories import PasswordHasher, UserRepository
from notes_api.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        issuer: CredentialIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._issuer = issuer
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def execute(self, username: str, password: str) -> IssuedCredential:
        user = self._users.find_by_username(username.strip())

        if user is None:
            # burn the same hashing cost as a real check
            self._password_hasher.verify(password, self._get_dummy_hash())
            logger.info("auth.login: rejected, unknown user")
            raise UnknownUserError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: rejected, wrong password user_id={user.id}")
            raise WrongPasswordError()

        return self._issuer.issue(user.id)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("dummy-password-for-timing")
        return self._dummy_hash
