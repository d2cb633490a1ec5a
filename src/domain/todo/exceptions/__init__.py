from domain.todo.exceptions.todo_exceptions import (
    StorageUnavailableError,
    TodoDescriptionEmptyError,
    TodoError,
    ValidationError,
)

__all__ = [
    "StorageUnavailableError",
    "TodoDescriptionEmptyError",
    "TodoError",
    "ValidationError",
]
