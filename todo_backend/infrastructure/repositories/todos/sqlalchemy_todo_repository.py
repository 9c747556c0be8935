# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import case, func
from sqlalchemy.orm import Query, Session

from todo_backend.domain.todos.entities import (
    CompletionRatio,
    Priority,
    TodoFields,
    TodoSort,
)
from todo_backend.domain.todos.entities import Todo as DomainTodo
from todo_backend.domain.todos.repositories import OwnedTodoRepository, TodoRepository
from todo_backend.infrastructure.db.models import Todo
from todo_backend.infrastructure.unit_of_work import unit_of_work_scope
from todo_backend.shared.utils.timezones import as_utc

_PRIORITY_RANK = case(
    {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2},
    value=Todo.priority,
    else_=3,
)

_ORDERINGS = {
    # id breaks ties between rows created within the same clock tick
    TodoSort.CREATED: (Todo.created_at.desc(), Todo.id.desc()),
    TodoSort.DEADLINE: (Todo.deadline.asc(), Todo.id.desc()),
    TodoSort.PRIORITY: (_PRIORITY_RANK, Todo.created_at.desc(), Todo.id.desc()),
}


def _to_domain(row: Todo) -> DomainTodo:
    return DomainTodo(
        id=row.id,
        owner_id=row.user_id,
        title=row.title,
        memo=row.memo or "",
        priority=Priority(row.priority),
        is_completed=bool(row.is_completed),
        deadline=as_utc(row.deadline),
        created_at=as_utc(row.created_at),
        deleted_at=as_utc(row.deleted_at) if row.deleted_at else None,
    )


class SqlAlchemyOwnedTodoRepository(OwnedTodoRepository):
    def __init__(self, session_factory: Callable[[], Session], owner_id: int) -> None:
        self._session_factory = session_factory
        self.owner_id = owner_id

    def _active(self, session: Session) -> Query[Todo]:
        return session.query(Todo).filter(
            Todo.user_id == self.owner_id,
            Todo.deleted_at.is_(None),
        )

    def list(self, sort: TodoSort = TodoSort.CREATED) -> Sequence[DomainTodo]:
        with unit_of_work_scope(self._session_factory, readonly=True) as session:
            rows = self._active(session).order_by(*_ORDERINGS[sort]).all()
            return [_to_domain(row) for row in rows]

    def add(self, fields: TodoFields) -> DomainTodo:
        with unit_of_work_scope(self._session_factory) as session:
            row = Todo(
                user_id=self.owner_id,
                title=fields.title,
                memo=fields.memo,
                priority=fields.priority,
                deadline=fields.deadline,
                is_completed=bool(fields.is_completed),
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def update(self, todo_id: int, fields: TodoFields) -> DomainTodo | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._active(session).filter(Todo.id == todo_id).first()
            if row is None:
                return None
            row.title = fields.title
            row.memo = fields.memo
            row.priority = fields.priority
            row.deadline = fields.deadline
            if fields.is_completed is not None:
                row.is_completed = fields.is_completed
            session.flush()
            return _to_domain(row)

    def soft_delete(self, todo_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = self._active(session).filter(Todo.id == todo_id).first()
            if row is None:
                return False
            row.deleted_at = datetime.now(UTC)
            return True

    def completion_ratio(self) -> CompletionRatio:
        with unit_of_work_scope(self._session_factory, readonly=True) as session:
            counts = dict(
                self._active(session)
                .with_entities(Todo.is_completed, func.count(Todo.id))
                .group_by(Todo.is_completed)
                .all()
            )
        return CompletionRatio(
            completed=int(counts.get(True, 0)),
            active=int(counts.get(False, 0)),
        )

    def completed_deadlines(self, start: datetime, end: datetime) -> Sequence[datetime]:
        with unit_of_work_scope(self._session_factory, readonly=True) as session:
            rows = (
                self._active(session)
                .with_entities(Todo.deadline)
                .filter(
                    Todo.is_completed.is_(True),
                    Todo.deadline >= start,
                    Todo.deadline < end,
                )
                .all()
            )
        return [as_utc(deadline) for (deadline,) in rows]


class SqlAlchemyTodoRepository(TodoRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def for_owner(self, owner_id: int) -> SqlAlchemyOwnedTodoRepository:
        return SqlAlchemyOwnedTodoRepository(self._session_factory, owner_id)
