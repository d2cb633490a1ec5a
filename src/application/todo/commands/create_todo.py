from __future__ import annotations

from application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto
from application.todo.store import add_todo
from domain.todo.exceptions.todo_exceptions import TodoDescriptionEmptyError


class CreateTodoCommand:
    def execute(self, request: CreateTodoRequest) -> TodoItemDto:
        description = (request.description or "").strip()
        if not description:
            raise TodoDescriptionEmptyError("Todo description cannot be empty.")
        return TodoItemDto.from_entity(add_todo(description))
