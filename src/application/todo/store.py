"""Process-wide todo store.

Thin functions over the active ``TodoRepository``. Every successful write
fires the change signal so views can re-read ``list_todos()``; no-ops do not.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from domain.todo.entities.todo import Todo
from domain.todo.exceptions.todo_exceptions import TodoDescriptionEmptyError
from domain.todo.positions import STEP, next_append_position, spread_positions
from domain.todo.repositories.todo_repository import TodoRepository
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]

_REPOSITORY: TodoRepository = InMemoryTodoRepository()
_LISTENERS: List[ChangeListener] = []


def use_repository(repository: TodoRepository) -> None:
    global _REPOSITORY
    _REPOSITORY = repository


def get_repository() -> TodoRepository:
    return _REPOSITORY


def subscribe(listener: ChangeListener) -> Callable[[], None]:
    _LISTENERS.append(listener)

    def unsubscribe() -> None:
        if listener in _LISTENERS:
            _LISTENERS.remove(listener)

    return unsubscribe


def notify_changed() -> None:
    for listener in list(_LISTENERS):
        try:
            listener()
        except Exception:
            logger.exception("todo.listener_failed listener=%r", listener)


def add_todo(description: str) -> Todo:
    description = (description or "").strip()
    if not description:
        raise TodoDescriptionEmptyError("Todo description cannot be empty.")
    # MAX then INSERT is not atomic; two concurrent adds may share a position.
    position = next_append_position(_REPOSITORY.max_position())
    todo = _REPOSITORY.add(description, position)
    logger.info("todo.add id=%s position=%s", todo.id, todo.position)
    notify_changed()
    return todo


def add_todos(items: Iterable[tuple[str, bool]]) -> List[Todo]:
    pending = [((description or "").strip(), bool(completed)) for description, completed in items]
    if not pending:
        return []
    if any(not description for description, _ in pending):
        raise TodoDescriptionEmptyError("Todo description cannot be empty.")
    start = next_append_position(_REPOSITORY.max_position())
    rows = [
        (description, completed, start + STEP * offset)
        for offset, (description, completed) in enumerate(pending)
    ]
    todos = _REPOSITORY.add_many(rows)
    logger.info("todo.add_many count=%s", len(todos))
    notify_changed()
    return todos


def list_todos() -> List[Todo]:
    return _REPOSITORY.list()


def get_todo(todo_id: int) -> Optional[Todo]:
    return _REPOSITORY.get(todo_id)


def toggle_todo(todo_id: int) -> Optional[Todo]:
    todo = _REPOSITORY.toggle(todo_id)
    if todo is None:
        logger.debug("todo.toggle not_found id=%s", todo_id)
        return None
    logger.info("todo.toggle id=%s completed=%s", todo.id, todo.completed)
    notify_changed()
    return todo


def remove_todo(todo_id: int) -> bool:
    removed = _REPOSITORY.delete(todo_id)
    if not removed:
        logger.debug("todo.remove not_found id=%s", todo_id)
        return False
    logger.info("todo.remove id=%s", todo_id)
    notify_changed()
    return True


def set_todo_position(todo_id: int, position: int) -> bool:
    updated = _REPOSITORY.set_position(todo_id, position)
    if not updated:
        logger.debug("todo.set_position not_found id=%s", todo_id)
        return False
    logger.info("todo.set_position id=%s position=%s", todo_id, position)
    notify_changed()
    return True


def rebalance_positions() -> int:
    todos = _REPOSITORY.list()
    changed = {
        todo.id: position
        for todo, position in zip(todos, spread_positions(len(todos)))
        if todo.position != position
    }
    if not changed:
        return 0
    updated = _REPOSITORY.set_positions(changed)
    logger.info("todo.rebalance updated=%s total=%s", updated, len(todos))
    notify_changed()
    return updated


def clear_todos() -> int:
    removed = _REPOSITORY.clear()
    logger.info("todo.clear removed=%s", removed)
    notify_changed()
    return removed


def reset_todos() -> None:
    global _REPOSITORY
    _REPOSITORY = InMemoryTodoRepository()
    _LISTENERS.clear()
