# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Priority(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class TodoSort(StrEnum):
    CREATED = "created"
    DEADLINE = "deadline"
    PRIORITY = "priority"


@dataclass(slots=True, frozen=True)
class Todo:

    id: int
    owner_id: int
    title: str
    memo: str
    priority: Priority
    is_completed: bool
    deadline: datetime
    created_at: datetime
    deleted_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class TodoFields:
    """Every mutable column of a todo; written together in one statement.

    ``is_completed=None`` keeps the stored flag (new todos start incomplete).
    """

    title: str
    memo: str
    priority: Priority
    deadline: datetime
    is_completed: bool | None = None


@dataclass(slots=True, frozen=True)
class CompletionRatio:

    completed: int
    active: int

    @property
    def total(self) -> int:
        return self.completed + self.active


@dataclass(slots=True, frozen=True)
class DailyCompletion:

    day: date
    count: int


@dataclass(slots=True, frozen=True)
class TodoStats:

    ratio: CompletionRatio
    daily: list[DailyCompletion]
