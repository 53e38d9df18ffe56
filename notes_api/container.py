# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from notes_api.application.services.password_hashing import WerkzeugPasswordHasher
from notes_api.application.services.sessions import SessionService
from notes_api.application.services.tokens import JwtTokenService
from notes_api.application.use_cases.notes.create_note import CreateNoteUseCase
from notes_api.application.use_cases.notes.delete_note import DeleteNoteUseCase
from notes_api.application.use_cases.notes.get_note import GetNoteUseCase
from notes_api.application.use_cases.notes.list_notes import ListNotesUseCase
from notes_api.application.use_cases.notes.update_note import UpdateNoteUseCase
from notes_api.application.use_cases.users.login_user import LoginUserUseCase
from notes_api.application.use_cases.users.register_user import RegisterUserUseCase
from notes_api.domain.auth.ports import SessionStore
from notes_api.infrastructure.db import Database
from notes_api.infrastructure.repositories.notes.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)
from notes_api.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from notes_api.infrastructure.sessions.memory_store import InMemorySessionStore
from notes_api.infrastructure.sessions.sqlalchemy_store import SqlAlchemySessionStore
from notes_api.interfaces.http.auth.middleware import AuthMiddleware
from notes_api.interfaces.http.auth.strategies import (
    AuthStrategy,
    BearerTokenStrategy,
    CookieSettings,
    SessionCookieStrategy,
)
from notes_api.interfaces.http.controllers.auth_controller import AuthController
from notes_api.interfaces.http.controllers.misc_controller import MiscController
from notes_api.interfaces.http.controllers.notes_controller import NotesController
from notes_api.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def note_repository(self) -> SqlAlchemyNoteRepository:
        return SqlAlchemyNoteRepository(self.database)

    # Credential strategy

    @cached_property
    def token_service(self) -> JwtTokenService:
        auth = self.config.auth
        return JwtTokenService(
            secret=self.config.secret_key,
            ttl=timedelta(seconds=auth.token_ttl_seconds),
            issuer=auth.token_issuer,
            algorithm=auth.jwt_algorithm,
        )

    @cached_property
    def session_store(self) -> SessionStore:
        if self.config.auth.session_backend == "memory":
            return InMemorySessionStore()
        return SqlAlchemySessionStore(self.database)

    @cached_property
    def session_service(self) -> SessionService:
        return SessionService(
            store=self.session_store,
            max_age=timedelta(seconds=self.config.auth.session_max_age),
        )

    @cached_property
    def auth_strategy(self) -> AuthStrategy:
        auth = self.config.auth
        if auth.strategy == "session":
            return SessionCookieStrategy(
                self.session_service,
                CookieSettings(
                    name=auth.session_cookie_name,
                    max_age=auth.session_max_age,
                    secure=self.config.security.cookie_secure,
                    samesite=self.config.security.cookie_samesite,
                ),
            )
        return BearerTokenStrategy(self.token_service, realm=auth.token_issuer)

    @cached_property
    def auth_middleware(self) -> AuthMiddleware:
        return AuthMiddleware(self.auth_strategy)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            issuer=self.auth_strategy.issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_notes_use_case(self) -> ListNotesUseCase:
        return ListNotesUseCase(notes=self.note_repository)

    @cached_property
    def create_note_use_case(self) -> CreateNoteUseCase:
        return CreateNoteUseCase(notes=self.note_repository)

    @cached_property
    def get_note_use_case(self) -> GetNoteUseCase:
        return GetNoteUseCase(notes=self.note_repository)

    @cached_property
    def update_note_use_case(self) -> UpdateNoteUseCase:
        return UpdateNoteUseCase(notes=self.note_repository)

    @cached_property
    def delete_note_use_case(self) -> DeleteNoteUseCase:
        return DeleteNoteUseCase(notes=self.note_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            strategy=self.auth_strategy,
            security=self.config.security,
        )

    @cached_property
    def notes_controller(self) -> NotesController:
        return NotesController(
            auth=self.auth_middleware,
            list_notes=self.list_notes_use_case,
            create_note=self.create_note_use_case,
            get_note=self.get_note_use_case,
            update_note=self.update_note_use_case,
            delete_note=self.delete_note_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(self.database)
