# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from todo_backend.domain.todos.entities import Todo, TodoSort
from todo_backend.domain.todos.repositories import TodoRepository
from todo_backend.domain.users.entities import AuthContext


class ListTodosUseCase:
    def __init__(self, *, todos: TodoRepository) -> None:
        self._todos = todos

    def execute(self, auth: AuthContext, sort: TodoSort = TodoSort.CREATED) -> Sequence[Todo]:
        return self._todos.for_owner(auth.user_id).list(sort)
