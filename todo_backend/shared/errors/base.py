# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message or self.code, "code": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str = "domain_error",
        status: HTTPStatus = HTTPStatus.BAD_REQUEST,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, status=status, message=message, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str = "Invalid request",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class AuthError(DomainError):
    def __init__(
        self,
        code: str = "unauthorized",
        *,
        status: HTTPStatus = HTTPStatus.UNAUTHORIZED,
        message: str = "Authentication required",
    ) -> None:
        super().__init__(code=code, status=status, message=message)


class ConflictError(DomainError):
    def __init__(self, code: str = "conflict", *, message: str = "Conflict") -> None:
        super().__init__(code=code, status=HTTPStatus.CONFLICT, message=message)


class NotFoundError(DomainError):
    def __init__(
        self,
        code: str = "not_found",
        *,
        message: str = "Not found",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code, status=HTTPStatus.NOT_FOUND, message=message, context=context
        )


class StoreError(AppError):
    def __init__(
        self, code: str = "store_error", *, message: str = "Database operation failed"
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
        )
