# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens (signed JWTs).

Nothing is persisted server side: a token is valid until ``exp`` passes and
cannot be revoked earlier.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from todo_backend.domain.users.entities import AuthContext, User
from todo_backend.domain.users.exceptions import InvalidTokenError, MissingTokenError
from todo_backend.domain.users.repositories import TokenService
from todo_backend.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, user: User) -> str:
        now = self._clock()
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> AuthContext:
        if not token:
            raise MissingTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
            return AuthContext(user_id=int(payload["sub"]), email=str(payload.get("email", "")))
        except jwt.ExpiredSignatureError as exc:
            logger.info("auth.verify: token expired")
            raise InvalidTokenError() from exc
        except (jwt.InvalidTokenError, ValueError) as exc:
            logger.warning(f"auth.verify: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc
