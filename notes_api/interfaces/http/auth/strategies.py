# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Credential strategies: where a credential travels and how it is checked.

A deployment runs exactly one strategy. It decides where the middleware looks
for the credential, which service validates it, and how login and logout
hand the credential to or take it from the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from flask import Request, Response, jsonify

from notes_api.application.services.sessions import SessionService
from notes_api.application.services.tokens import JwtTokenService
from notes_api.domain.auth.entities import IssuedCredential, Principal, Strategy
from notes_api.domain.auth.exceptions import MissingCredentialsError
from notes_api.domain.auth.ports import CredentialIssuer
from notes_api.interfaces.http.dto.auth import LoginSuccessDTO

LOGIN_MESSAGE = "Logged in successfully"


class CredentialValidator(Protocol):
    def resolve(self, req: Request) -> Principal: ...


class AuthStrategy(CredentialValidator, Protocol):
    name: Strategy

    @property
    def issuer(self) -> CredentialIssuer: ...

    def login_response(self, credential: IssuedCredential) -> Response: ...
    def logout(self, req: Request, response: Response) -> None: ...
    def challenge(self, response: Response) -> None: ...


class BearerTokenStrategy:
    name: Strategy = "token"

    def __init__(self, tokens: JwtTokenService, *, realm: str = "notes-api") -> None:
        self._tokens = tokens
        self._realm = realm

    @property
    def issuer(self) -> CredentialIssuer:
        return self._tokens

    def resolve(self, req: Request) -> Principal:
        scheme, _, token = req.headers.get("Authorization", "").partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise MissingCredentialsError()
        return self._tokens.validate(token)

    def login_response(self, credential: IssuedCredential) -> Response:
        payload = LoginSuccessDTO(message=LOGIN_MESSAGE, token=credential.value)
        return jsonify(payload.model_dump())

    def logout(self, req: Request, response: Response) -> None:
        # stateless: the token stays valid until it expires
        return None

    def challenge(self, response: Response) -> None:
        response.headers["WWW-Authenticate"] = f'Bearer realm="{self._realm}"'


@dataclass(slots=True, frozen=True)
class CookieSettings:
    name: str = "auth-session"
    max_age: int = 2592000
    secure: bool = False
    samesite: Literal["Lax", "Strict"] = "Lax"
    path: str = "/"


class SessionCookieStrategy:
    name: Strategy = "session"

    def __init__(self, sessions: SessionService, cookie: CookieSettings) -> None:
        self._sessions = sessions
        self._cookie = cookie

    @property
    def issuer(self) -> CredentialIssuer:
        return self._sessions

    def resolve(self, req: Request) -> Principal:
        handle = req.cookies.get(self._cookie.name, "")
        if not handle:
            raise MissingCredentialsError()
        return self._sessions.validate(handle)

    def login_response(self, credential: IssuedCredential) -> Response:
        response = jsonify(LoginSuccessDTO(message=LOGIN_MESSAGE).model_dump(exclude_none=True))
        response.set_cookie(
            self._cookie.name,
            credential.value,
            max_age=self._cookie.max_age,
            path=self._cookie.path,
            httponly=True,
            secure=self._cookie.secure,
            samesite=self._cookie.samesite,
        )
        return response

    def logout(self, req: Request, response: Response) -> None:
        handle = req.cookies.get(self._cookie.name, "")
        if handle:
            self._sessions.revoke(handle)
        response.delete_cookie(
            self._cookie.name,
            path=self._cookie.path,
            httponly=True,
            secure=self._cookie.secure,
            samesite=self._cookie.samesite,
        )

    def challenge(self, response: Response) -> None:
        return None


__all__ = [
    "AuthStrategy",
    "BearerTokenStrategy",
    "CookieSettings",
    "CredentialValidator",
    "SessionCookieStrategy",
]
