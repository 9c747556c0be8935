from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Any

from pydantic import BaseModel, Field, StrictBool, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from todo_backend.domain.todos.entities import (
    Priority,
    Todo,
    TodoFields,
    TodoSort,
    TodoStats,
)
from todo_backend.shared.errors.validation_types import ValidationErrorType
from todo_backend.shared.utils.timezones import (
    ensure_renderable,
    format_local,
    parse_local_datetime,
)

MAX_TITLE_LENGTH = 50
MAX_MEMO_LENGTH = 200


def _context_tz(info: ValidationInfo) -> tzinfo:
    context = info.context or {}
    return context.get("tz", UTC)


class TodoInputDTO(BaseModel):
    """Body of POST /todos and PUT /todos/<id>.

    Validate with ``context={"tz": <local tz>}`` so naive deadlines are read as
    local wall-clock time. Unknown keys (``id``, ``created_at``…) are ignored.
    """

    title: str = Field("", validate_default=True)
    memo: str | None = None
    priority: Priority = Field("", validate_default=True)
    deadline: datetime = Field("", validate_default=True)
    is_completed: StrictBool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Title is required",
                {},
            )
        if len(value) > MAX_TITLE_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TOO_LONG,
                "Title must be at most {max_length} characters",
                {"max_length": MAX_TITLE_LENGTH},
            )
        return value

    @field_validator("memo")
    @classmethod
    def validate_memo(cls, value: str | None) -> str | None:
        if value is not None and len(value) > MAX_MEMO_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TOO_LONG,
                "Memo must be at most {max_length} characters",
                {"max_length": MAX_MEMO_LENGTH},
            )
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def validate_priority(cls, value: Any) -> Any:
        if value not in [p.value for p in Priority]:
            raise PydanticCustomError(
                ValidationErrorType.INVALID_CHOICE,
                "Priority must be one of HIGH, MEDIUM or LOW",
                {"choices": [p.value for p in Priority]},
            )
        return value

    @field_validator("deadline", mode="before")
    @classmethod
    def validate_deadline(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, datetime):
            value = value.isoformat()
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Deadline is required",
                {},
            )
        try:
            tz = _context_tz(info)
            return ensure_renderable(parse_local_datetime(value, tz), tz)
        except ValueError as exc:
            raise PydanticCustomError(
                ValidationErrorType.INVALID_DATETIME,
                "Deadline must be a date and time like 2025-01-10T09:00",
                {},
            ) from exc

    def to_fields(self) -> TodoFields:
        return TodoFields(
            title=self.title,
            memo=self.memo or "",
            priority=self.priority,
            deadline=self.deadline,
            is_completed=self.is_completed,
        )


class TodoListQueryDTO(BaseModel):
    sort: TodoSort = TodoSort.CREATED

    @field_validator("sort", mode="before")
    @classmethod
    def validate_sort(cls, value: Any) -> Any:
        if value not in [s.value for s in TodoSort]:
            raise PydanticCustomError(
                ValidationErrorType.INVALID_SORT,
                "sort must be one of created, deadline or priority",
                {"choices": [s.value for s in TodoSort]},
            )
        return value


class TodoResponseDTO(BaseModel):
    id: int
    title: str
    memo: str
    priority: Priority
    is_completed: bool
    deadline: str
    created_at: str

    @classmethod
    def from_entity(cls, todo: Todo, tz: tzinfo) -> TodoResponseDTO:
        return cls(
            id=todo.id,
            title=todo.title,
            memo=todo.memo,
            priority=todo.priority,
            is_completed=todo.is_completed,
            deadline=format_local(todo.deadline, tz),
            created_at=format_local(todo.created_at, tz),
        )


class TodoDeletedDTO(BaseModel):
    message: str = "Todo deleted"
    id: int


class CompletionRatioDTO(BaseModel):
    completed: int
    active: int


class DailyCompletionDTO(BaseModel):
    date: str
    count: int


class TodoStatsDTO(BaseModel):
    ratio: CompletionRatioDTO
    daily: list[DailyCompletionDTO]

    @classmethod
    def from_entity(cls, stats: TodoStats) -> TodoStatsDTO:
        return cls(
            ratio=CompletionRatioDTO(
                completed=stats.ratio.completed, active=stats.ratio.active
            ),
            daily=[
                DailyCompletionDTO(date=item.day.isoformat(), count=item.count)
                for item in stats.daily
            ],
        )
