# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_backend.shared.errors.base import NotFoundError


class TodoNotFoundError(NotFoundError):
    def __init__(self, todo_id: int) -> None:
        super().__init__(
            code="todo_not_found",
            message="Todo not found",
            context={"todo_id": todo_id},
        )
