# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    CompletionRatio,
    DailyCompletion,
    Priority,
    Todo,
    TodoFields,
    TodoSort,
    TodoStats,
)
from .exceptions import TodoNotFoundError
from .repositories import OwnedTodoRepository, TodoRepository

__all__ = [
    "CompletionRatio",
    "DailyCompletion",
    "OwnedTodoRepository",
    "Priority",
    "Todo",
    "TodoFields",
    "TodoNotFoundError",
    "TodoRepository",
    "TodoSort",
    "TodoStats",
]
