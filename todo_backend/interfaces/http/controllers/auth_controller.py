# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from todo_backend.application.use_cases.users.login_user import LoginUserUseCase
from todo_backend.application.use_cases.users.register_user import RegisterUserUseCase
from todo_backend.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginResponseDTO,
    SignupRequestDTO,
    UserDTO,
)
from todo_backend.shared.errors import StoreError
from todo_backend.shared.errors.validation import raise_validation_error
from todo_backend.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.name, dto.email, dto.password)
        except SQLAlchemyError as exc:
            logger.exception("auth.signup: store error")
            raise StoreError("signup_failed") from exc

        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(UserDTO.from_entity(user).model_dump()), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user, token = self._login_use_case.execute(dto.email, dto.password)
        except SQLAlchemyError as exc:
            logger.exception("auth.login: store error")
            raise StoreError("login_failed") from exc

        payload = LoginResponseDTO(token=token, user=UserDTO.from_entity(user))
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload.model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
