from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from presentation.ui.styles import C_TODO_DONE, C_TODO_OPEN


def todo_to_viewmodel(todo: Mapping[str, Any], index: int, total: int) -> dict[str, Any]:
    return {
        "id": todo["id"],
        "description": todo["description"],
        "completed": bool(todo["completed"]),
        "text_classes": C_TODO_DONE if todo["completed"] else C_TODO_OPEN,
        "can_move_up": index > 0,
        "can_move_down": index < total - 1,
    }


def todos_to_viewmodels(todos: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    items = list(todos)
    return [todo_to_viewmodel(todo, index, len(items)) for index, todo in enumerate(items)]


def count_label(count: Mapping[str, int]) -> Optional[str]:
    if not count["total"]:
        return None
    return f"{count['completed']} of {count['total']} completed"
