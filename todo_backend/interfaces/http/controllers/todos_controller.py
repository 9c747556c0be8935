# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from datetime import tzinfo
from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from todo_backend.application.use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoStatsUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)
from todo_backend.domain.users.entities import AuthContext
from todo_backend.domain.users.repositories import TokenService
from todo_backend.infrastructure.auth import auth_required
from todo_backend.interfaces.http.dto.todos import (
    TodoDeletedDTO,
    TodoInputDTO,
    TodoListQueryDTO,
    TodoResponseDTO,
    TodoStatsDTO,
)
from todo_backend.shared.errors import StoreError
from todo_backend.shared.errors.validation import raise_validation_error
from todo_backend.shared.logging import logger


class TodosController:
    def __init__(
        self,
        *,
        tokens: TokenService,
        tz: tzinfo,
        list_todos: ListTodosUseCase,
        create_todo: CreateTodoUseCase,
        update_todo: UpdateTodoUseCase,
        delete_todo: DeleteTodoUseCase,
        todo_stats: GetTodoStatsUseCase,
    ) -> None:
        self._tokens = tokens
        self._tz = tz
        self._list_todos = list_todos
        self._create_todo = create_todo
        self._update_todo = update_todo
        self._delete_todo = delete_todo
        self._todo_stats = todo_stats

    def as_blueprint(self) -> Blueprint:
        protected = auth_required(self._tokens)
        bp = Blueprint("todos", __name__, url_prefix="/api")
        bp.add_url_rule("/todos", view_func=protected(self.list_todos), methods=["GET"])
        bp.add_url_rule("/todos", view_func=protected(self.create), methods=["POST"])
        bp.add_url_rule(
            "/todos/<int:todo_id>",
            view_func=protected(self.update),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/todos/<int:todo_id>",
            view_func=protected(self.delete),
            methods=["DELETE"],
        )
        bp.add_url_rule("/todos/stats", view_func=protected(self.stats), methods=["GET"])
        return bp

    def _parse_input(self) -> TodoInputDTO:
        try:
            return TodoInputDTO.model_validate(
                request.get_json(silent=True) or {}, context={"tz": self._tz}
            )
        except ValidationError as exc:
            raise_validation_error(exc)

    def _render(self, todo) -> dict:
        return TodoResponseDTO.from_entity(todo, self._tz).model_dump(mode="json")

    def list_todos(self, auth: AuthContext):
        t0 = perf_counter()
        try:
            query = TodoListQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            items = self._list_todos.execute(auth, query.sort)
        except SQLAlchemyError as exc:
            logger.exception(f"todos.list: err (user_id={auth.user_id})")
            raise StoreError("todos_list_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"todos.list: ok (user_id={auth.user_id}, n={len(items)}, "
            f"sort={query.sort}, dt_ms={dt:.0f})"
        )
        return jsonify([self._render(todo) for todo in items])

    def create(self, auth: AuthContext):
        t0 = perf_counter()
        dto = self._parse_input()
        try:
            todo = self._create_todo.execute(auth, dto.to_fields())
        except SQLAlchemyError as exc:
            logger.exception(f"todos.create: err (user_id={auth.user_id})")
            raise StoreError("todo_create_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"todos.create: ok (user_id={auth.user_id}, todo_id={todo.id}, dt_ms={dt:.0f})")
        return jsonify(self._render(todo)), HTTPStatus.CREATED

    def update(self, todo_id: int, auth: AuthContext):
        t0 = perf_counter()
        dto = self._parse_input()
        try:
            todo = self._update_todo.execute(auth, todo_id, dto.to_fields())
        except SQLAlchemyError as exc:
            logger.exception(f"todos.update: err (user_id={auth.user_id}, todo_id={todo_id})")
            raise StoreError("todo_update_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"todos.update: ok (user_id={auth.user_id}, todo_id={todo_id}, dt_ms={dt:.0f})")
        return jsonify(self._render(todo))

    def delete(self, todo_id: int, auth: AuthContext):
        t0 = perf_counter()
        try:
            deleted_id = self._delete_todo.execute(auth, todo_id)
        except SQLAlchemyError as exc:
            logger.exception(f"todos.delete: err (user_id={auth.user_id}, todo_id={todo_id})")
            raise StoreError("todo_delete_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"todos.delete: ok (user_id={auth.user_id}, todo_id={todo_id}, dt_ms={dt:.0f})")
        return jsonify(TodoDeletedDTO(id=deleted_id).model_dump())

    def stats(self, auth: AuthContext):
        try:
            stats = self._todo_stats.execute(auth)
        except SQLAlchemyError as exc:
            logger.exception(f"todos.stats: err (user_id={auth.user_id})")
            raise StoreError("todo_stats_failed") from exc

        logger.info(
            f"todos.stats: ok (user_id={auth.user_id}, completed={stats.ratio.completed}, "
            f"active={stats.ratio.active})"
        )
        return jsonify(TodoStatsDTO.from_entity(stats).model_dump())
