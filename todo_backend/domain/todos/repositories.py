# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import CompletionRatio, Todo, TodoFields, TodoSort


class OwnedTodoRepository(Protocol):
    """Active todos of exactly one owner; deleted rows are invisible here."""

    owner_id: int

    def list(self, sort: TodoSort = TodoSort.CREATED) -> Sequence[Todo]: ...
    def add(self, fields: TodoFields) -> Todo: ...
    def update(self, todo_id: int, fields: TodoFields) -> Todo | None: ...
    def soft_delete(self, todo_id: int) -> bool: ...
    def completion_ratio(self) -> CompletionRatio: ...
    def completed_deadlines(self, start: datetime, end: datetime) -> Sequence[datetime]: ...


class TodoRepository(Protocol):
    def for_owner(self, owner_id: int) -> OwnedTodoRepository: ...
