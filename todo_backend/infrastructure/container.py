# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta, tzinfo
from functools import cached_property

from todo_backend.application.services.password_hashing import WerkzeugPasswordHasher
from todo_backend.application.services.tokens import JwtTokenService
from todo_backend.application.use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoStatsUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)
from todo_backend.application.use_cases.users import LoginUserUseCase, RegisterUserUseCase
from todo_backend.infrastructure.db import Database
from todo_backend.infrastructure.repositories.todos.sqlalchemy_todo_repository import (
    SqlAlchemyTodoRepository,
)
from todo_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from todo_backend.interfaces.http.controllers.auth_controller import AuthController
from todo_backend.interfaces.http.controllers.misc_controller import MiscController
from todo_backend.interfaces.http.controllers.todos_controller import TodosController
from todo_backend.shared.config import AppConfig
from todo_backend.shared.utils.timezones import resolve_timezone


class Container:
    """Object graph for one application instance."""

    def __init__(self, *, config: AppConfig, database: Database) -> None:
        self.config = config
        self.database = database

    @cached_property
    def tz(self) -> tzinfo:
        return resolve_timezone(self.config.timezone)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            ttl=timedelta(hours=self.config.token_ttl_hours),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def todo_repository(self) -> SqlAlchemyTodoRepository:
        return SqlAlchemyTodoRepository(self.database.session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    # Todos

    @cached_property
    def todos_controller(self) -> TodosController:
        return TodosController(
            tokens=self.token_service,
            tz=self.tz,
            list_todos=ListTodosUseCase(todos=self.todo_repository),
            create_todo=CreateTodoUseCase(todos=self.todo_repository),
            update_todo=UpdateTodoUseCase(todos=self.todo_repository),
            delete_todo=DeleteTodoUseCase(todos=self.todo_repository),
            todo_stats=GetTodoStatsUseCase(todos=self.todo_repository, tz=self.tz),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
