from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from notes_api.application.services.sessions import SessionService
from notes_api.domain.auth.entities import SessionRecord
from notes_api.domain.auth.exceptions import SessionNotFoundError
from notes_api.infrastructure.sessions.memory_store import InMemorySessionStore
from notes_api.tests.fakes import FrozenClock

START = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
MAX_AGE = timedelta(seconds=2592000)


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(START)


@pytest.fixture()
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture()
def sessions(store: InMemorySessionStore, clock: FrozenClock) -> SessionService:
    return SessionService(store=store, max_age=MAX_AGE, clock=clock)


def test_issue_stores_record_and_validate_resolves_user(
    sessions: SessionService, store: InMemorySessionStore
) -> None:
    issued = sessions.issue(3)

    assert store.get(issued.value) == SessionRecord(
        user_id=3, issued_at=START, expires_at=START + MAX_AGE
    )
    principal = sessions.validate(issued.value)
    assert principal.user_id == 3
    assert principal.strategy == "session"
    assert principal.expires_at == START + MAX_AGE


def test_handles_are_opaque_and_unique(sessions: SessionService) -> None:
    first = sessions.issue(3).value
    second = sessions.issue(3).value

    assert first != second
    assert len(first) >= 32


def test_unknown_handle_is_not_found(sessions: SessionService) -> None:
    with pytest.raises(SessionNotFoundError):
        sessions.validate("no-such-handle")


def test_expired_session_is_not_found_and_evicted(
    sessions: SessionService, store: InMemorySessionStore, clock: FrozenClock
) -> None:
    handle = sessions.issue(3).value
    clock.advance(seconds=MAX_AGE.total_seconds())

    with pytest.raises(SessionNotFoundError):
        sessions.validate(handle)
    assert store.get(handle) is None


def test_revoked_session_is_not_found(
    sessions: SessionService, store: InMemorySessionStore
) -> None:
    handle = sessions.issue(3).value
    sessions.revoke(handle)

    assert len(store) == 0
    with pytest.raises(SessionNotFoundError):
        sessions.validate(handle)


def test_revoke_ignores_empty_handle(sessions: SessionService) -> None:
    sessions.revoke("")
