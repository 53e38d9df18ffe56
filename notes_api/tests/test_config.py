from __future__ import annotations

import pytest

from notes_api.shared.config import AppConfig, AuthConfig, SecurityConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AUTH_STRATEGY", "TOKEN_TTL_SECONDS", "SESSION_MAX_AGE", "COOKIE_SAMESITE"):
        monkeypatch.delenv(name, raising=False)

    auth = AuthConfig()
    security = SecurityConfig()

    assert auth.strategy == "token"
    assert auth.token_ttl_seconds == 86400
    assert auth.session_cookie_name == "auth-session"
    assert auth.session_max_age == 2592000
    assert security.cookie_samesite == "Lax"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_STRATEGY", "session")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    assert AuthConfig().strategy == "session"
    assert SecurityConfig().allowed_origins == ["https://a.example", "https://b.example"]


def test_unknown_strategy_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_STRATEGY", "both")

    with pytest.raises(ValueError):
        AuthConfig()


def test_production_refuses_insecure_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", secret_key="dev")


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(
        app_env="production",
        secret_key="a-strong-production-secret-value-0123456789",
        security=SecurityConfig(cookie_secure=True, enable_hsts=True),
    )

    assert config.is_production()
