from __future__ import annotations

import pytest

from postboard.application.services.password_hashing import WerkzeugPasswordHasher
from postboard.domain.users.exceptions import HashingError


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert "secret123" not in first
    assert first.startswith("pbkdf2:sha256:1000$")


def test_verify_accepts_correct_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert hasher.verify("secret123", hashed) is True


def test_verify_rejects_wrong_password_without_raising(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert hasher.verify("bad", hashed) is False
    assert hasher.verify("", hashed) is False


@pytest.mark.parametrize("stored", ["", "plain-text", "only$one"])
def test_verify_malformed_hash_raises(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    with pytest.raises(HashingError):
        hasher.verify("secret123", stored)


def test_verify_unknown_method_raises(hasher: WerkzeugPasswordHasher) -> None:
    with pytest.raises(HashingError):
        hasher.verify("secret123", "rot13$salt$value")


def test_hash_rejects_oversized_input() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000", max_bytes=16)

    with pytest.raises(HashingError):
        hasher.hash("x" * 17)


def test_hash_rejects_empty_input(hasher: WerkzeugPasswordHasher) -> None:
    with pytest.raises(HashingError):
        hasher.hash("")


def test_hashing_error_is_reported_as_internal() -> None:
    err = HashingError("boom")

    assert err.to_dict() == {"error": "internal_error"}
    assert int(err.status) == 500
    assert err.reason == "boom"
