# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Salted password hashes for account credentials (werkzeug scrypt/pbkdf2)."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from todo_backend.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str | None = None) -> None:
        # None keeps werkzeug's current default method
        self._method = method

    def hash(self, password: str) -> str:
        if self._method is None:
            return generate_password_hash(password)
        return generate_password_hash(password, method=self._method)

    def verify(self, password: str, hashed: str) -> bool:
        # a malformed stored hash counts as a mismatch, not a server error
        try:
            return check_password_hash(hashed, password)
        except ValueError:
            return False
