# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_backend.domain.todos.exceptions import TodoNotFoundError
from todo_backend.domain.todos.repositories import TodoRepository
from todo_backend.domain.users.entities import AuthContext


class DeleteTodoUseCase:
    """Soft delete: the row stays in the table with ``deleted_at`` set."""

    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, auth: AuthContext, todo_id: int) -> int:
        if not self._todos.for_owner(auth.user_id).soft_delete(todo_id):
            raise TodoNotFoundError(todo_id)
        return todo_id
