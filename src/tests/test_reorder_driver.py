from __future__ import annotations

from application.todo import store
from application.todo.reorder import ReorderStatus, plan_reorder, reorder_todo
from domain.todo.entities.todo import Todo


def _todos(*positions: int) -> list[Todo]:
    return [
        Todo(id=index, description=f"Todo {index}", position=position)
        for index, position in enumerate(positions, start=1)
    ]


def test_move_to_head_halves_first_position() -> None:
    outcome = plan_reorder(_todos(1000, 2000, 3000), moving_id=3, target_index=0)

    assert outcome.status is ReorderStatus.MOVED
    assert (outcome.from_index, outcome.to_index) == (2, 0)
    assert outcome.position == 500


def test_move_down_lands_between_target_and_next() -> None:
    outcome = plan_reorder(_todos(1000, 2000, 3000), moving_id=1, target_index=1)

    assert outcome.position == 2500


def test_move_up_lands_between_previous_and_target() -> None:
    outcome = plan_reorder(_todos(1000, 2000, 3000), moving_id=3, target_index=1)

    assert outcome.position == 1500


def test_move_to_tail_appends_step() -> None:
    outcome = plan_reorder(_todos(1000, 2000, 3000), moving_id=1, target_index=2)

    assert outcome.position == 4000


def test_target_index_is_clamped() -> None:
    ordered = _todos(1000, 2000, 3000)

    assert plan_reorder(ordered, moving_id=1, target_index=99).position == 4000
    assert plan_reorder(ordered, moving_id=3, target_index=-5).position == 500


def test_same_index_is_unchanged() -> None:
    outcome = plan_reorder(_todos(1000, 2000), moving_id=2, target_index=1)

    assert outcome.status is ReorderStatus.UNCHANGED
    assert outcome.position == 2000


def test_clamped_to_same_index_is_unchanged() -> None:
    outcome = plan_reorder(_todos(1000, 2000), moving_id=2, target_index=10)

    assert outcome.status is ReorderStatus.UNCHANGED


def test_missing_id_is_not_found() -> None:
    outcome = plan_reorder(_todos(1000, 2000), moving_id=42, target_index=0)

    assert outcome.status is ReorderStatus.NOT_FOUND
    assert outcome.position is None


def test_planning_is_repeatable_against_same_list() -> None:
    ordered = _todos(1000, 2000, 3000, 4000)

    first = plan_reorder(ordered, moving_id=4, target_index=1)
    second = plan_reorder(ordered, moving_id=4, target_index=1)

    assert first == second


def test_reorder_writes_only_moving_row(in_memory_todo_repo) -> None:
    for description in ("First", "Second", "Third"):
        store.add_todo(description)
    before = {todo.id: todo.position for todo in store.list_todos()}

    outcome = reorder_todo(store.list_todos(), moving_id=3, target_index=0)

    after = {todo.id: todo.position for todo in store.list_todos()}
    assert outcome.moved
    assert after[3] == 500
    assert {k: v for k, v in after.items() if k != 3} == {k: v for k, v in before.items() if k != 3}


def test_reorder_no_op_performs_no_write(in_memory_todo_repo, monkeypatch) -> None:
    store.add_todo("Only")
    writes: list[tuple[int, int]] = []
    monkeypatch.setattr(
        in_memory_todo_repo,
        "set_position",
        lambda todo_id, position: writes.append((todo_id, position)) or True,
    )

    outcome = reorder_todo(store.list_todos(), moving_id=1, target_index=0)

    assert outcome.status is ReorderStatus.UNCHANGED
    assert writes == []


def test_reorder_notifies_once_after_write(in_memory_todo_repo) -> None:
    store.add_todo("A")
    store.add_todo("B")
    calls: list[str] = []
    store.subscribe(lambda: calls.append("changed"))

    reorder_todo(store.list_todos(), moving_id=1, target_index=1)
    reorder_todo(store.list_todos(), moving_id=1, target_index=1)

    assert calls == ["changed"]


def test_reorder_against_stale_list_reports_not_found(in_memory_todo_repo) -> None:
    store.add_todo("A")
    store.add_todo("B")
    stale = store.list_todos()
    store.remove_todo(1)

    outcome = reorder_todo(stale, moving_id=1, target_index=1)

    assert outcome.status is ReorderStatus.NOT_FOUND
    assert [todo.description for todo in store.list_todos()] == ["B"]
