from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from todo_backend.application.use_cases.todos import GetTodoStatsUseCase
from todo_backend.domain.todos.entities import Priority, TodoFields
from todo_backend.domain.users.entities import AuthContext
from todo_backend.infrastructure.db import Database
from todo_backend.infrastructure.repositories.todos.sqlalchemy_todo_repository import (
    SqlAlchemyTodoRepository,
)
from todo_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

TOKYO = ZoneInfo("Asia/Tokyo")
# 2025-01-10 12:00 in Tokyo
NOW = datetime(2025, 1, 10, 3, 0, tzinfo=UTC)


def _local(raw: str) -> datetime:
    return datetime.fromisoformat(raw).replace(tzinfo=TOKYO).astimezone(UTC)


@pytest.fixture()
def setup(database: Database):
    user = SqlAlchemyUserRepository(database.session_factory).add(
        "Alice", "alice@gmail.com", "hash"
    )
    todos = SqlAlchemyTodoRepository(database.session_factory)
    use_case = GetTodoStatsUseCase(todos=todos, tz=TOKYO, clock=lambda: NOW)
    auth = AuthContext(user_id=user.id, email=user.email)
    return todos.for_owner(user.id), use_case, auth


def _add(repo, deadline: str, done: bool) -> int:
    todo = repo.add(
        TodoFields(
            title="t",
            memo="",
            priority=Priority.LOW,
            deadline=_local(deadline),
            is_completed=done,
        )
    )
    return todo.id


def test_empty_stats_have_seven_zero_days(setup) -> None:
    _, use_case, auth = setup

    stats = use_case.execute(auth)

    assert (stats.ratio.completed, stats.ratio.active) == (0, 0)
    assert [d.day for d in stats.daily] == [
        date(2025, 1, 4) + timedelta(days=i) for i in range(7)
    ]
    assert all(d.count == 0 for d in stats.daily)


def test_histogram_buckets_by_local_deadline_day(setup) -> None:
    repo, use_case, auth = setup
    _add(repo, "2025-01-10T23:30", done=True)
    _add(repo, "2025-01-04T00:30", done=True)
    _add(repo, "2025-01-04T08:00", done=True)
    _add(repo, "2025-01-03T23:59", done=True)
    _add(repo, "2025-01-08T10:00", done=False)
    deleted = _add(repo, "2025-01-09T10:00", done=True)
    repo.soft_delete(deleted)

    stats = use_case.execute(auth)

    counts = {d.day.isoformat(): d.count for d in stats.daily}
    assert counts == {
        "2025-01-04": 2,
        "2025-01-05": 0,
        "2025-01-06": 0,
        "2025-01-07": 0,
        "2025-01-08": 0,
        "2025-01-09": 0,
        "2025-01-10": 1,
    }
    assert (stats.ratio.completed, stats.ratio.active) == (4, 1)
