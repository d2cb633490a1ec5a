from __future__ import annotations

from application.contracts.todo_dtos import MoveTodoRequest, ReorderTodoRequest
from application.todo.reorder import ReorderOutcome, ReorderStatus, reorder_todo
from application.todo.store import list_todos


class ReorderTodoCommand:
    """Drop a todo at a list index (drag and drop)."""

    def execute(self, request: ReorderTodoRequest) -> ReorderOutcome:
        return reorder_todo(list_todos(), request.todo_id, request.target_index)


class MoveTodoCommand:
    """Shift a todo by ``delta`` slots (keyboard up/down)."""

    def execute(self, request: MoveTodoRequest) -> ReorderOutcome:
        ordered = list_todos()
        for index, todo in enumerate(ordered):
            if todo.id == request.todo_id:
                return reorder_todo(ordered, request.todo_id, index + request.delta)
        return ReorderOutcome(todo_id=request.todo_id, status=ReorderStatus.NOT_FOUND)
