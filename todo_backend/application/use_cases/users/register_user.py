# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_backend.domain.users.entities import User
from todo_backend.domain.users.exceptions import EmailAlreadyRegisteredError
from todo_backend.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> User:
        if self._users.find_by_email(email):
            raise EmailAlreadyRegisteredError()
        hashed = self._password_hasher.hash(password)
        return self._users.add(name=name, email=email, password_hash=hashed)
