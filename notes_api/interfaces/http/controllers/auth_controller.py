# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, make_response, request

from notes_api.application.use_cases.users.login_user import LoginUserUseCase
from notes_api.application.use_cases.users.register_user import RegisterUserUseCase
from notes_api.interfaces.http.auth.strategies import AuthStrategy
from notes_api.interfaces.http.dto.auth import (LoginRequestDTO, MessageDTO,
                                                RegisterRequestDTO)
from notes_api.shared.config import SecurityConfig
from notes_api.shared.errors.validation import parse_body
from notes_api.shared.logging import logger
from notes_api.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        strategy: AuthStrategy,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._strategy = strategy
        self._security = security

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO, request.get_json(silent=True) or {})

        user = self._register_use_case.execute(dto.username, dto.email, dto.password)

        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message="User created successfully").model_dump()
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO, request.get_json(silent=True) or {})

        credential = self._login_use_case.execute(dto.username, dto.password)

        logger.info(
            f"auth.login: ok user_id={credential.user_id} strategy={self._strategy.name} "
            f"exp={credential.expires_at.isoformat()}"
        )
        return self._strategy.login_response(credential), 200

    def logout(self) -> tuple[Response, int]:
        response = make_response("Logged out successfully", 200)
        response.mimetype = "text/plain"
        self._strategy.logout(request, response)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(self._security)
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=limited(self.register), methods=["POST"])
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET", "POST"])
        return bp
