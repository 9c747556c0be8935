from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from flask import Flask
from sqlalchemy.exc import OperationalError

from todo_backend.domain.todos.entities import (
    CompletionRatio,
    DailyCompletion,
    Priority,
    Todo,
    TodoFields,
    TodoSort,
    TodoStats,
)
from todo_backend.domain.todos.exceptions import TodoNotFoundError
from todo_backend.domain.users.entities import AuthContext, User
from todo_backend.domain.users.repositories import TokenService
from todo_backend.interfaces.http.controllers.todos_controller import TodosController
from todo_backend.shared.middleware.error_handler import configure_error_handling

AUTH = AuthContext(user_id=1, email="alice@gmail.com")
HEADERS = {"Authorization": "Bearer ok"}
MILK = {"title": "Buy milk", "priority": "LOW", "deadline": "2025-01-10T09:00"}


class AcceptAllTokens(TokenService):
    def issue(self, user: User) -> str:
        return "ok"

    def verify(self, token: str | None) -> AuthContext:
        return AUTH


def _todo(fields: TodoFields, todo_id: int = 1) -> Todo:
    return Todo(
        id=todo_id,
        owner_id=AUTH.user_id,
        title=fields.title,
        memo=fields.memo,
        priority=fields.priority,
        is_completed=bool(fields.is_completed),
        deadline=fields.deadline,
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
    )


class StubList:
    def __init__(self) -> None:
        self.sorts: list[TodoSort] = []

    def execute(self, auth: AuthContext, sort: TodoSort = TodoSort.CREATED) -> list[Todo]:
        self.sorts.append(sort)
        return []


class StubCreate:
    def __init__(self) -> None:
        self.received: list[TodoFields] = []

    def execute(self, auth: AuthContext, fields: TodoFields) -> Todo:
        self.received.append(fields)
        return _todo(fields, todo_id=5)


class StubUpdate:
    def execute(self, auth: AuthContext, todo_id: int, fields: TodoFields) -> Todo:
        if todo_id != 5:
            raise TodoNotFoundError(todo_id)
        return _todo(fields, todo_id=todo_id)


class BrokenDelete:
    def execute(self, auth: AuthContext, todo_id: int) -> int:
        raise OperationalError("DELETE", {}, Exception("database is locked"))


class StubStats:
    def execute(self, auth: AuthContext) -> TodoStats:
        return TodoStats(
            ratio=CompletionRatio(completed=2, active=1),
            daily=[DailyCompletion(day=date(2025, 1, 10), count=2)],
        )


@pytest.fixture()
def stubs():
    return {
        "list_todos": StubList(),
        "create_todo": StubCreate(),
        "update_todo": StubUpdate(),
        "delete_todo": BrokenDelete(),
        "todo_stats": StubStats(),
    }


@pytest.fixture()
def client(stubs):
    app = Flask(__name__)
    configure_error_handling(app)
    controller = TodosController(tokens=AcceptAllTokens(), tz=UTC, **stubs)
    app.register_blueprint(controller.as_blueprint())
    return app.test_client()


def test_create_passes_validated_fields(client, stubs) -> None:
    resp = client.post("/api/todos", json=MILK, headers=HEADERS)

    assert resp.status_code == 201
    assert resp.get_json()["id"] == 5
    assert resp.get_json()["deadline"] == "2025-01-10 09:00:00"
    (fields,) = stubs["create_todo"].received
    assert fields.priority is Priority.LOW
    assert fields.deadline == datetime(2025, 1, 10, 9, 0, tzinfo=UTC)


def test_invalid_body_never_reaches_use_case(client, stubs) -> None:
    resp = client.post("/api/todos", json={"title": ""}, headers=HEADERS)

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "validation_error"
    assert stubs["create_todo"].received == []


def test_non_json_body_is_a_validation_error(client) -> None:
    resp = client.post("/api/todos", data="title=x", headers=HEADERS)

    assert resp.status_code == 400


def test_list_forwards_sort(client, stubs) -> None:
    assert client.get("/api/todos?sort=priority", headers=HEADERS).get_json() == []
    assert stubs["list_todos"].sorts == [TodoSort.PRIORITY]


def test_update_unknown_todo_is_404(client) -> None:
    resp = client.put("/api/todos/9", json=MILK, headers=HEADERS)

    assert resp.status_code == 404
    assert resp.get_json()["code"] == "todo_not_found"


def test_store_failure_is_masked(client) -> None:
    resp = client.delete("/api/todos/5", headers=HEADERS)

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["code"] == "todo_delete_failed"
    assert "locked" not in body["error"]


def test_stats_shape(client) -> None:
    resp = client.get("/api/todos/stats", headers=HEADERS)

    assert resp.get_json() == {
        "ratio": {"completed": 2, "active": 1},
        "daily": [{"date": "2025-01-10", "count": 2}],
    }
