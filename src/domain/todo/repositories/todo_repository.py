from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

from domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Storage contract for todos.

    Every write touches at most one row, except ``clear``, ``add_many`` and
    ``set_positions``, which are test and maintenance helpers.
    ``list`` returns todos ordered by ``(position, id)``.
    """

    def add(self, description: str, position: int, completed: bool = False) -> Todo:
        ...

    def add_many(self, items: Iterable[tuple[str, bool, int]]) -> list[Todo]:
        ...

    def get(self, todo_id: int) -> Optional[Todo]:
        ...

    def list(self) -> list[Todo]:
        ...

    def max_position(self) -> Optional[int]:
        ...

    def toggle(self, todo_id: int) -> Optional[Todo]:
        ...

    def set_position(self, todo_id: int, position: int) -> bool:
        ...

    def set_positions(self, positions: dict[int, int]) -> int:
        ...

    def delete(self, todo_id: int) -> bool:
        ...

    def clear(self) -> int:
        ...
