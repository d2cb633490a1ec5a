from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import TodoItemDto
from application.todo.store import toggle_todo


class ToggleTodoCommand:
    def execute(self, todo_id: int) -> Optional[TodoItemDto]:
        """Flip ``completed``; ``None`` when the todo no longer exists."""
        todo = toggle_todo(todo_id)
        return TodoItemDto.from_entity(todo) if todo else None
