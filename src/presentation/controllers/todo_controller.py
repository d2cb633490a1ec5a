from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import (
    CreateTodoRequest,
    MoveTodoRequest,
    ReorderTodoRequest,
    TodoItemDto,
)
from application.todo.commands.create_todo import CreateTodoCommand
from application.todo.commands.rebalance_positions import RebalancePositionsCommand
from application.todo.commands.remove_todo import RemoveTodoCommand
from application.todo.commands.reorder_todo import MoveTodoCommand, ReorderTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.queries.count_todos import CountTodosQuery
from application.todo.queries.list_todos import ListTodosQuery

TodoDict = dict[str, int | str | bool]

_CREATE = CreateTodoCommand()
_TOGGLE = ToggleTodoCommand()
_REMOVE = RemoveTodoCommand()
_REORDER = ReorderTodoCommand()
_MOVE = MoveTodoCommand()
_REBALANCE = RebalancePositionsCommand()
_LIST = ListTodosQuery()
_COUNT = CountTodosQuery()


def _as_dict(todo: TodoItemDto) -> TodoDict:
    return {
        "id": todo.id,
        "description": todo.description,
        "completed": todo.completed,
        "position": todo.position,
    }


def create_todo(description: str) -> TodoDict:
    return _as_dict(_CREATE.execute(CreateTodoRequest(description=description)))


def list_todos() -> list[TodoDict]:
    return [_as_dict(todo) for todo in _LIST.execute()]


def toggle_todo(todo_id: int) -> Optional[TodoDict]:
    todo = _TOGGLE.execute(todo_id)
    return _as_dict(todo) if todo else None


def remove_todo(todo_id: int) -> bool:
    return _REMOVE.execute(todo_id)


def reorder_todo(todo_id: int, target_index: int) -> str:
    return _REORDER.execute(ReorderTodoRequest(todo_id=todo_id, target_index=target_index)).status.value


def move_todo(todo_id: int, delta: int) -> str:
    return _MOVE.execute(MoveTodoRequest(todo_id=todo_id, delta=delta)).status.value


def rebalance_todos() -> int:
    return _REBALANCE.execute()


def count_todos() -> dict[str, int]:
    count = _COUNT.execute()
    return {"completed": count.completed, "total": count.total}
