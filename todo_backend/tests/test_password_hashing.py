from __future__ import annotations

from todo_backend.application.services.password_hashing import WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert "secret123" not in first
    assert hasher.verify("secret123", first)
    assert not hasher.verify("secret124", first)


def test_malformed_stored_hash_is_a_mismatch() -> None:
    assert WerkzeugPasswordHasher().verify("secret123", "not-a-hash") is False
