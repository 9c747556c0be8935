# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_backend.domain.todos.entities import Todo, TodoFields
from todo_backend.domain.todos.exceptions import TodoNotFoundError
from todo_backend.domain.todos.repositories import TodoRepository
from todo_backend.domain.users.entities import AuthContext


class UpdateTodoUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, auth: AuthContext, todo_id: int, fields: TodoFields) -> Todo:
        updated = self._todos.for_owner(auth.user_id).update(todo_id, fields)
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return updated
