# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import request

from todo_backend.domain.users.entities import AuthContext
from todo_backend.domain.users.repositories import TokenService
from todo_backend.shared.logging import logger


def bearer_token() -> str | None:
    auth = request.headers.get("Authorization", "")
    scheme, _, credentials = auth.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def auth_required(tokens: TokenService) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Gate a view: the wrapped handler receives ``auth: AuthContext``.

    Verification errors propagate to the error handler, so the handler body
    never runs for an unauthenticated request.
    """

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a: Any, **kw: Any) -> Any:
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No bearer token on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
            auth: AuthContext = tokens.verify(token)
            logger.debug(f"Auth OK: user={auth.user_id} {request.method} {request.path}")
            return f(*a, auth=auth, **kw)

        return inner

    return decorator
