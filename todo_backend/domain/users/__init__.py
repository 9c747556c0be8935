# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthContext, User
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "AuthContext",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHasher",
    "TokenService",
    "User",
    "UserRepository",
]
