from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_core import PydanticCustomError

from todo_backend.domain.users.entities import User
from todo_backend.shared.errors.validation_types import ValidationErrorType

MIN_PASSWORD_LENGTH = 6
MAX_NAME_LENGTH = 100


def _normalized_email(value: Any, handler: ValidatorFunctionWrapHandler) -> str:
    try:
        return str(handler(value)).strip().lower()
    except ValidationError as exc:
        raise PydanticCustomError(
            ValidationErrorType.INVALID_EMAIL,
            "Enter a valid email address",
            {},
        ) from exc


class SignupRequestDTO(BaseModel):
    name: str = Field("", validate_default=True)
    email: EmailStr = Field("", validate_default=True)
    password: str = Field("", validate_default=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Name is required",
                {},
            )
        if len(value) > MAX_NAME_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TOO_LONG,
                "Name must be at most {max_length} characters",
                {"max_length": MAX_NAME_LENGTH},
            )
        return value

    @field_validator("email", mode="wrap")
    @classmethod
    def validate_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _normalized_email(value, handler)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        return value


class LoginRequestDTO(BaseModel):
    email: EmailStr = Field("", validate_default=True)
    password: str = Field("", validate_default=True)  # no strength check on login

    @field_validator("email", mode="wrap")
    @classmethod
    def validate_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _normalized_email(value, handler)

    @field_validator("password")
    @classmethod
    def validate_password_present(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Password is required",
                {},
            )
        return value


class UserDTO(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(id=user.id, name=user.name, email=user.email)


class LoginResponseDTO(BaseModel):
    token: str
    user: UserDTO
