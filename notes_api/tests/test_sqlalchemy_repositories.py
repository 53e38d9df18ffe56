from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest

from notes_api.domain.auth.entities import SessionRecord
from notes_api.domain.users.entities import User
from notes_api.domain.users.exceptions import UserAlreadyExistsError
from notes_api.infrastructure.db import Database
from notes_api.infrastructure.repositories.notes.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)
from notes_api.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from notes_api.infrastructure.sessions.sqlalchemy_store import SqlAlchemySessionStore
from notes_api.shared.config import DatabaseConfig
from notes_api.shared.errors import InfrastructureError


@pytest.fixture()
def database() -> Iterator[Database]:
    db = Database(DatabaseConfig(url="sqlite://"))
    db.init_db()
    yield db
    db.dispose()


def _user(username: str, email: str) -> User:
    return User(
        id=0,
        username=username,
        email=email,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def test_user_repository_roundtrip(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)

    stored = users.add(_user("alice", "alice@x.com"))

    assert stored.id > 0
    assert users.find_by_username("alice") == stored
    assert users.find_by_email("alice@x.com") == stored
    assert users.find_by_id(stored.id) == stored
    assert users.find_by_username("bob") is None
    assert stored.created_at.tzinfo is not None


def test_user_repository_unique_constraint(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)
    users.add(_user("alice", "alice@x.com"))

    with pytest.raises(UserAlreadyExistsError):
        users.add(_user("alice", "second@x.com"))


def test_note_repository_scopes_mutations_to_owner(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)
    alice = users.add(_user("alice", "alice@x.com"))
    bob = users.add(_user("bob", "bob@x.com"))
    notes = SqlAlchemyNoteRepository(database)

    first = notes.add(alice.id, "one", "1")
    second = notes.add(alice.id, "two", "2")
    notes.add(bob.id, "bob", "b")

    assert [n.id for n in notes.list_for_owner(alice.id)] == [second.id, first.id]

    assert notes.update(first.id, bob.id, title="x", content=None) is None
    assert notes.delete(first.id, bob.id) is False
    assert notes.get(first.id) == first

    updated = notes.update(first.id, alice.id, title="uno", content=None)
    assert updated is not None
    assert (updated.title, updated.content) == ("uno", "1")

    assert notes.delete(first.id, alice.id) is True
    assert notes.get(first.id) is None


def test_session_store_roundtrip(database: Database) -> None:
    users = SqlAlchemyUserRepository(database)
    alice = users.add(_user("alice", "alice@x.com"))
    store = SqlAlchemySessionStore(database)
    now = datetime(2026, 1, 1, tzinfo=UTC)
    record = SessionRecord(user_id=alice.id, issued_at=now, expires_at=now + timedelta(days=30))

    store.set("handle-1", record)

    assert store.get("handle-1") == record
    assert store.get("handle-2") is None

    store.delete("handle-1")
    assert store.get("handle-1") is None


def test_health_check(database: Database) -> None:
    assert database.check() is True


def test_storage_errors_surface_as_infrastructure_error() -> None:
    database = Database(DatabaseConfig(url="sqlite://"))
    try:
        # schema never created
        with pytest.raises(InfrastructureError) as info:
            SqlAlchemyNoteRepository(database).get(1)
    finally:
        database.dispose()

    assert info.value.code == "database_error"
    assert info.value.status == 500
