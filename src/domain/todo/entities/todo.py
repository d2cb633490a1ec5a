from __future__ import annotations

from dataclasses import dataclass

from domain.todo.exceptions.todo_exceptions import TodoDescriptionEmptyError


@dataclass(frozen=True)
class Todo:
    id: int
    description: str
    completed: bool = False
    position: int = 0

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise TodoDescriptionEmptyError("Todo description must not be empty.")

    @property
    def sort_key(self) -> tuple[int, int]:
        """Ascending position, ties broken by ascending id."""
        return (self.position, self.id)
