from __future__ import annotations

from application.contracts.todo_dtos import TodoCountDto
from application.todo.store import list_todos


class CountTodosQuery:
    def execute(self) -> TodoCountDto:
        todos = list_todos()
        return TodoCountDto(
            completed=sum(1 for todo in todos if todo.completed),
            total=len(todos),
        )
