# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from todo_backend.domain.users.entities import User
from todo_backend.domain.users.exceptions import InvalidCredentialsError
from todo_backend.domain.users.repositories import (
    PasswordHasher,
    TokenService,
    UserRepository,
)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        # checked against when the email is unknown so both failures cost one hash
        self._decoy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(email)
        if user is None:
            self._password_hasher.verify(password, self._decoy_hash)
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()
        return user, self._tokens.issue(user)
