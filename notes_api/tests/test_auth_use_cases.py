from __future__ import annotations

from datetime import timedelta

import pytest

from notes_api.application.services.tokens import JwtTokenService
from notes_api.application.use_cases.users.login_user import LoginUserUseCase
from notes_api.application.use_cases.users.register_user import RegisterUserUseCase
from notes_api.domain.users.exceptions import (
    InvalidCredentialsError,
    UnknownUserError,
    UserAlreadyExistsError,
    WrongPasswordError,
)
from notes_api.shared.errors import ValidationError
from notes_api.tests.fakes import DeterministicHasher, InMemoryUserRepository

SECRET = "use-case-secret-that-is-long-enough-for-hs256"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, ttl=timedelta(hours=24))


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: JwtTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, issuer=tokens, password_hasher=DeterministicHasher())


def test_register_stores_hash_not_password(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute(" alice ", "alice@x.io", "pw1")

    assert user.id == 1
    assert user.username == "alice"
    assert user.password_hash == "hashed:pw1"
    assert users.find_by_email("alice@x.io") == user


@pytest.mark.parametrize(
    ("username", "email"),
    [("alice", "other@x.io"), ("other", "alice@x.io")],
)
def test_register_duplicate_identity_conflicts_without_second_record(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    username: str,
    email: str,
) -> None:
    register.execute("alice", "alice@x.io", "pw1")

    with pytest.raises(UserAlreadyExistsError) as info:
        register.execute(username, email, "pw2")

    assert info.value.status == 409
    assert len(users) == 1


def test_register_rejects_empty_fields(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    with pytest.raises(ValidationError) as info:
        register.execute("  ", "", "pw1")

    assert info.value.status == 400
    assert info.value.context["fields"] == ["email", "username"]
    assert len(users) == 0


def test_login_issues_token_for_registered_user(
    register: RegisterUserUseCase, login: LoginUserUseCase, tokens: JwtTokenService
) -> None:
    user = register.execute("alice", "alice@x.io", "pw1")

    credential = login.execute("alice", "pw1")

    assert credential.user_id == user.id
    assert tokens.validate(credential.value).user_id == user.id


@pytest.mark.parametrize("password", ["", "pw", "PW1", "pw1 "])
def test_login_wrong_password(
    register: RegisterUserUseCase, login: LoginUserUseCase, password: str
) -> None:
    register.execute("alice", "alice@x.io", "pw1")

    with pytest.raises(WrongPasswordError):
        login.execute("alice", password)


def test_login_unknown_user_fails_like_wrong_password(login: LoginUserUseCase) -> None:
    with pytest.raises(UnknownUserError) as unknown:
        login.execute("nobody", "pw1")

    assert isinstance(unknown.value, InvalidCredentialsError)
    assert unknown.value.to_dict() == WrongPasswordError().to_dict()
    assert unknown.value.status == WrongPasswordError().status == 401


def test_login_unknown_user_still_runs_a_hash_check(users: InMemoryUserRepository) -> None:
    calls: list[str] = []

    class RecordingHasher(DeterministicHasher):
        def verify(self, password: str, hashed: str) -> bool:
            calls.append(hashed)
            return super().verify(password, hashed)

    use_case = LoginUserUseCase(
        users=users,
        issuer=JwtTokenService(secret=SECRET, ttl=timedelta(hours=1)),
        password_hasher=RecordingHasher(),
    )

    with pytest.raises(UnknownUserError):
        use_case.execute("nobody", "pw1")

    assert len(calls) == 1
