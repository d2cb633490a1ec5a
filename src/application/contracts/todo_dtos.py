from __future__ import annotations

from dataclasses import dataclass

from domain.todo.entities.todo import Todo


@dataclass(frozen=True)
class CreateTodoRequest:
    description: str


@dataclass(frozen=True)
class ReorderTodoRequest:
    todo_id: int
    target_index: int


@dataclass(frozen=True)
class MoveTodoRequest:
    todo_id: int
    delta: int


@dataclass(frozen=True)
class SeedTodo:
    description: str
    completed: bool = False


@dataclass(frozen=True)
class TodoItemDto:
    id: int
    description: str
    completed: bool
    position: int

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoItemDto":
        return cls(
            id=todo.id,
            description=todo.description,
            completed=todo.completed,
            position=todo.position,
        )


@dataclass(frozen=True)
class TodoCountDto:
    completed: int
    total: int
