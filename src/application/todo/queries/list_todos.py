from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto
from application.todo.store import list_todos


class ListTodosQuery:
    def execute(self) -> list[TodoItemDto]:
        return [TodoItemDto.from_entity(item) for item in list_todos()]
