# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import UTC, datetime, timedelta, tzinfo

from todo_backend.domain.todos.entities import DailyCompletion, TodoStats
from todo_backend.domain.todos.repositories import TodoRepository
from todo_backend.domain.users.entities import AuthContext
from todo_backend.shared.utils.timezones import (
    local_date,
    local_day_start,
    trailing_days,
)

WINDOW_DAYS = 7


def _utcnow() -> datetime:
    return datetime.now(UTC)


class GetTodoStatsUseCase:
    """Completion ratio plus a per-day histogram of completed todos.

    The histogram buckets by the todo's *deadline* day in local time, not by
    when it was ticked off, and always covers the last ``WINDOW_DAYS`` days
    including today with explicit zeros.
    """

    def __init__(
        self,
        *,
        todos: TodoRepository,
        tz: tzinfo,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._todos = todos
        self._tz = tz
        self._clock = clock

    def execute(self, auth: AuthContext) -> TodoStats:
        owned = self._todos.for_owner(auth.user_id)
        ratio = owned.completion_ratio()

        today = local_date(self._clock(), self._tz)
        days = trailing_days(today, WINDOW_DAYS)
        start = local_day_start(days[0], self._tz)
        end = local_day_start(today + timedelta(days=1), self._tz)

        counts = Counter(
            local_date(deadline, self._tz)
            for deadline in owned.completed_deadlines(start, end)
        )
        daily = [DailyCompletion(day=day, count=counts.get(day, 0)) for day in days]
        return TodoStats(ratio=ratio, daily=daily)
