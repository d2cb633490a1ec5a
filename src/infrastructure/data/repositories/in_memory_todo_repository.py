from __future__ import annotations

from dataclasses import replace
from itertools import count
from typing import Dict, Iterable, Optional

from domain.todo.repositories.todo_repository import TodoRepository
from domain.todo.entities.todo import Todo


class InMemoryTodoRepository(TodoRepository):
    """Simple in-memory repository backed by a dict."""

    def __init__(self, initial_items: Optional[Iterable[Todo]] = None) -> None:
        self._items: Dict[int, Todo] = {}
        self._next_id = count(1)
        for item in initial_items or ():
            self._items[item.id] = item
        if self._items:
            self._next_id = count(max(self._items) + 1)

    def add(self, description: str, position: int, completed: bool = False) -> Todo:
        todo = Todo(id=next(self._next_id), description=description, completed=completed, position=position)
        self._items[todo.id] = todo
        return todo

    def add_many(self, items: Iterable[tuple[str, bool, int]]) -> list[Todo]:
        pending = [
            Todo(id=next(self._next_id), description=description, completed=completed, position=position)
            for description, completed, position in items
        ]
        for todo in pending:
            self._items[todo.id] = todo
        return pending

    def get(self, todo_id: int) -> Optional[Todo]:
        return self._items.get(todo_id)

    def list(self) -> list[Todo]:
        return sorted(self._items.values(), key=lambda todo: todo.sort_key)

    def max_position(self) -> Optional[int]:
        if not self._items:
            return None
        return max(todo.position for todo in self._items.values())

    def toggle(self, todo_id: int) -> Optional[Todo]:
        todo = self._items.get(todo_id)
        if todo is None:
            return None
        toggled = replace(todo, completed=not todo.completed)
        self._items[todo_id] = toggled
        return toggled

    def set_position(self, todo_id: int, position: int) -> bool:
        todo = self._items.get(todo_id)
        if todo is None:
            return False
        self._items[todo_id] = replace(todo, position=position)
        return True

    def set_positions(self, positions: dict[int, int]) -> int:
        return sum(1 for todo_id, position in positions.items() if self.set_position(todo_id, position))

    def delete(self, todo_id: int) -> bool:
        if todo_id in self._items:
            del self._items[todo_id]
            return True
        return False

    def clear(self) -> int:
        removed = len(self._items)
        self._items.clear()
        return removed
