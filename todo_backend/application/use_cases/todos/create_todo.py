# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todo_backend.domain.todos.entities import Todo, TodoFields
from todo_backend.domain.todos.repositories import TodoRepository
from todo_backend.domain.users.entities import AuthContext


class CreateTodoUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, auth: AuthContext, fields: TodoFields) -> Todo:
        return self._todos.for_owner(auth.user_id).add(fields)
