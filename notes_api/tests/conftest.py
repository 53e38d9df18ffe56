from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from notes_api.app import CONTAINER_KEY, create_app
from notes_api.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-secret-key-with-enough-entropy-for-hs256-signing"

AppFactory = Callable[..., Flask]


@pytest.fixture()
def app_factory(tmp_path: Path) -> Iterator[AppFactory]:
    created: list[Flask] = []

    def build(strategy: str = "token", **security: object) -> Flask:
        security.setdefault("enable_rate_limit", False)
        config = AppConfig(
            app_env="test",
            secret_key=TEST_SECRET,
            log_file=tmp_path / "app.log",
            database=DatabaseConfig(url="sqlite://"),
            auth=AuthConfig(strategy=strategy, session_backend="database"),
            security=SecurityConfig(**security),
        )
        app = create_app(config)
        app.config.update(TESTING=True)
        created.append(app)
        return app

    yield build

    for app in created:
        app.extensions[CONTAINER_KEY].database.dispose()


@pytest.fixture()
def token_client(app_factory: AppFactory) -> FlaskClient:
    return app_factory("token").test_client()


@pytest.fixture()
def session_client(app_factory: AppFactory) -> FlaskClient:
    return app_factory("session").test_client()
