from __future__ import annotations

import pytest

from notes_api.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture(scope="module")
def hasher() -> WerkzeugPasswordHasher:
    # pbkdf2 keeps the suite fast; production uses scrypt
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_is_salted_and_verifies(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("pw1")
    second = hasher.hash("pw1")

    assert first != second
    assert "pw1" not in first
    assert hasher.verify("pw1", first)
    assert hasher.verify("pw1", second)


@pytest.mark.parametrize("attempt", ["", "pw", "pw12", "PW1", "pw1 ", "x" * 500])
def test_verify_rejects_wrong_password(hasher: WerkzeugPasswordHasher, attempt: str) -> None:
    assert hasher.verify(attempt, hasher.hash("pw1")) is False


@pytest.mark.parametrize("stored", ["", "not-a-hash", "$$", "unknown:method$salt$hash"])
def test_verify_returns_false_for_malformed_hash(
    hasher: WerkzeugPasswordHasher, stored: str
) -> None:
    assert hasher.verify("pw1", stored) is False


def test_default_method_is_scrypt() -> None:
    assert WerkzeugPasswordHasher().hash("pw1").startswith("scrypt:")
