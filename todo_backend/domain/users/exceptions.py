# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from todo_backend.shared.errors.base import AuthError, ConflictError


class EmailAlreadyRegisteredError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code="email_already_registered",
            message="This email address is already registered",
        )


class InvalidCredentialsError(AuthError):
    def __init__(self) -> None:
        super().__init__(
            code="invalid_credentials",
            message="Invalid email or password",
        )


class MissingTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__(
            code="token_missing",
            message="Authentication token is required",
        )


class InvalidTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__(
            code="token_invalid",
            status=HTTPStatus.FORBIDDEN,
            message="Authentication token is invalid or expired",
        )
