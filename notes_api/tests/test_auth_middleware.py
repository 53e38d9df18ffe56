from __future__ import annotations

from datetime import timedelta

import pytest
from flask import Flask, jsonify

from notes_api.application.services.sessions import SessionService
from notes_api.application.services.tokens import JwtTokenService
from notes_api.domain.auth.entities import Principal
from notes_api.infrastructure.sessions.memory_store import InMemorySessionStore
from notes_api.interfaces.http.auth.middleware import AuthMiddleware
from notes_api.interfaces.http.auth.strategies import (
    AuthStrategy,
    BearerTokenStrategy,
    CookieSettings,
    SessionCookieStrategy,
)

SECRET = "middleware-secret-that-is-long-enough-for-hs256"


def _build_app(strategy: AuthStrategy) -> tuple[Flask, list[Principal]]:
    seen: list[Principal] = []

    def whoami(principal: Principal):
        seen.append(principal)
        return jsonify({"user_id": principal.user_id})

    app = Flask(__name__)
    app.add_url_rule("/me", view_func=AuthMiddleware(strategy).protect(whoami))
    return app, seen


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, ttl=timedelta(hours=1))


@pytest.fixture()
def sessions() -> SessionService:
    return SessionService(store=InMemorySessionStore(), max_age=timedelta(hours=1))


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": ""},
        {"Authorization": "Bearer"},
        {"Authorization": "Bearer "},
        {"Authorization": "Basic YWxpY2U6cHcx"},
        {"Authorization": "Bearer not-a-token"},
    ],
)
def test_bearer_rejects_without_calling_view(tokens: JwtTokenService, headers: dict) -> None:
    app, seen = _build_app(BearerTokenStrategy(tokens))

    response = app.test_client().get("/me", headers=headers)

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}
    assert response.headers["WWW-Authenticate"] == 'Bearer realm="notes-api"'
    assert seen == []


def test_bearer_rejects_token_from_other_secret(tokens: JwtTokenService) -> None:
    forged = JwtTokenService(
        secret="some-other-secret-that-is-long-enough-for-hs256", ttl=timedelta(hours=1)
    ).issue(1)
    app, seen = _build_app(BearerTokenStrategy(tokens))

    response = app.test_client().get(
        "/me", headers={"Authorization": f"Bearer {forged.value}"}
    )

    assert response.status_code == 401
    assert seen == []


def test_bearer_injects_principal(tokens: JwtTokenService) -> None:
    app, seen = _build_app(BearerTokenStrategy(tokens))
    token = tokens.issue(42).value

    response = app.test_client().get("/me", headers={"Authorization": f"bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == {"user_id": 42}
    assert [p.user_id for p in seen] == [42]
    assert seen[0].strategy == "token"


def test_session_strategy_ignores_bearer_header(
    tokens: JwtTokenService, sessions: SessionService
) -> None:
    app, seen = _build_app(SessionCookieStrategy(sessions, CookieSettings()))

    response = app.test_client().get(
        "/me", headers={"Authorization": f"Bearer {tokens.issue(1).value}"}
    )

    assert response.status_code == 401
    assert "WWW-Authenticate" not in response.headers
    assert seen == []


def test_session_cookie_injects_principal(sessions: SessionService) -> None:
    app, seen = _build_app(SessionCookieStrategy(sessions, CookieSettings()))
    client = app.test_client()
    client.set_cookie("auth-session", sessions.issue(5).value)

    response = client.get("/me")

    assert response.status_code == 200
    assert seen[0].user_id == 5
    assert seen[0].strategy == "session"


def test_session_cookie_unknown_handle(sessions: SessionService) -> None:
    app, seen = _build_app(SessionCookieStrategy(sessions, CookieSettings()))
    client = app.test_client()
    client.set_cookie("auth-session", "forged-handle-value")

    assert client.get("/me").status_code == 401
    assert seen == []
