# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoStatsUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodoStatsUseCase",
    "ListTodosUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateTodoUseCase",
]
