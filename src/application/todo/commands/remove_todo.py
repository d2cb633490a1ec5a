from __future__ import annotations

from application.todo.store import remove_todo


class RemoveTodoCommand:
    def execute(self, todo_id: int) -> bool:
        return remove_todo(todo_id)
