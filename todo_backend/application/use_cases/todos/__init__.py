from .create_todo import CreateTodoUseCase
from .delete_todo import DeleteTodoUseCase
from .get_todo_stats import GetTodoStatsUseCase
from .list_todos import ListTodosUseCase
from .update_todo import UpdateTodoUseCase

__all__ = [
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodoStatsUseCase",
    "ListTodosUseCase",
    "UpdateTodoUseCase",
]
