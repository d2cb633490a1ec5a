from __future__ import annotations

import pytest

from application.contracts.todo_dtos import SeedTodo
from application.todo import store
from application.todo.seeds import clear_todos, seed_todo, seed_todos
from domain.todo.exceptions.todo_exceptions import ValidationError


def test_seed_todos_assigns_positions_in_input_order(todo_repo) -> None:
    seeded = seed_todos(
        [
            SeedTodo(description="Buy milk"),
            SeedTodo(description="Walk dog", completed=True),
            SeedTodo(description="Read book"),
        ]
    )

    assert [todo.position for todo in seeded] == [1000, 2000, 3000]
    assert [todo.completed for todo in store.list_todos()] == [False, True, False]


def test_seed_todos_appends_after_existing(todo_repo) -> None:
    store.add_todo("Existing")

    seeded = seed_todos([SeedTodo(description="Later")])

    assert seeded[0].position == 2000


def test_seed_todo_returns_generated_id(todo_repo) -> None:
    todo = seed_todo(SeedTodo(description="Target", completed=True))

    assert store.get_todo(todo.id).description == "Target"
    assert todo.completed is True


def test_seed_nothing_is_a_no_op(todo_repo) -> None:
    assert seed_todos([]) == []


def test_seed_rejects_empty_description(todo_repo) -> None:
    with pytest.raises(ValidationError):
        seed_todos([SeedTodo(description="ok"), SeedTodo(description=" ")])
    assert store.list_todos() == []


def test_clear_todos(todo_repo) -> None:
    seed_todos([SeedTodo(description="A"), SeedTodo(description="B")])

    assert clear_todos() == 2
    assert store.list_todos() == []
    assert clear_todos() == 0
