"""Seed helpers for tests and local demos.

They bypass the add form: positions are assigned in input order, and
``completed`` can be set up front.
"""
from __future__ import annotations

from typing import Iterable

from application.contracts.todo_dtos import SeedTodo, TodoItemDto
from application.todo import store


def clear_todos() -> int:
    return store.clear_todos()


def seed_todos(todos: Iterable[SeedTodo]) -> list[TodoItemDto]:
    created = store.add_todos((todo.description, todo.completed) for todo in todos)
    return [TodoItemDto.from_entity(todo) for todo in created]


def seed_todo(todo: SeedTodo) -> TodoItemDto:
    return seed_todos([todo])[0]
