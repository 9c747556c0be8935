from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from todo_backend.application.services.tokens import JwtTokenService
from todo_backend.domain.users.entities import User
from todo_backend.domain.users.exceptions import InvalidTokenError, MissingTokenError

SECRET = "unit-test-secret-0123456789-abcdefghij"


def _user() -> User:
    return User(
        id=7,
        name="Alice",
        email="alice@gmail.com",
        password_hash="x",
        created_at=datetime.now(UTC),
    )


def test_issued_token_round_trips_identity() -> None:
    service = JwtTokenService(secret=SECRET)

    auth = service.verify(service.issue(_user()))

    assert auth.user_id == 7
    assert auth.email == "alice@gmail.com"


def test_token_expires_after_ttl() -> None:
    service = JwtTokenService(secret=SECRET)
    payload = jwt.decode(service.issue(_user()), SECRET, algorithms=["HS256"])

    assert payload["exp"] - payload["iat"] == int(timedelta(hours=24).total_seconds())


def test_missing_token_is_unauthenticated() -> None:
    service = JwtTokenService(secret=SECRET)

    with pytest.raises(MissingTokenError) as excinfo:
        service.verify(None)

    assert excinfo.value.status == 401


def test_expired_token_is_forbidden() -> None:
    issued_yesterday = JwtTokenService(
        secret=SECRET, clock=lambda: datetime.now(UTC) - timedelta(hours=25)
    )
    token = issued_yesterday.issue(_user())

    with pytest.raises(InvalidTokenError) as excinfo:
        JwtTokenService(secret=SECRET).verify(token)

    assert excinfo.value.status == 403


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        jwt.encode({"sub": "7", "exp": datetime.now(UTC) + timedelta(hours=1)},
                   "some-other-secret-0123456789-abcdefgh", algorithm="HS256"),
        jwt.encode({"sub": "abc", "exp": datetime.now(UTC) + timedelta(hours=1)},
                   SECRET, algorithm="HS256"),
        jwt.encode({"email": "alice@gmail.com", "exp": datetime.now(UTC) + timedelta(hours=1)},
                   SECRET, algorithm="HS256"),
    ],
    ids=["malformed", "wrong-signature", "non-numeric-subject", "no-subject"],
)
def test_bad_tokens_are_forbidden(token: str) -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=SECRET).verify(token)
