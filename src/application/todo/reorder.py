"""Translate a move intent into a single position write.

The moving todo is conceptually lifted out of the ordered list and dropped at
``target_index``. Its new position is the midpoint of the two todos that will
surround it; no other row is rewritten.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from application.todo import store
from domain.todo.entities.todo import Todo
from domain.todo.positions import between_position, has_gap

logger = logging.getLogger(__name__)


class ReorderStatus(str, Enum):
    MOVED = "moved"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ReorderOutcome:
    todo_id: int
    status: ReorderStatus
    from_index: Optional[int] = None
    to_index: Optional[int] = None
    position: Optional[int] = None

    @property
    def moved(self) -> bool:
        return self.status is ReorderStatus.MOVED


def plan_reorder(ordered: Sequence[Todo], moving_id: int, target_index: int) -> ReorderOutcome:
    """Compute the new position for ``moving_id`` without touching storage.

    ``ordered`` must already be sorted by ``(position, id)``. The result only
    depends on the neighbour positions, so planning again against the same
    list yields the same value.
    """
    from_index = next((index for index, todo in enumerate(ordered) if todo.id == moving_id), None)
    if from_index is None:
        return ReorderOutcome(todo_id=moving_id, status=ReorderStatus.NOT_FOUND)

    to_index = max(0, min(target_index, len(ordered) - 1))
    if to_index == from_index:
        return ReorderOutcome(
            todo_id=moving_id,
            status=ReorderStatus.UNCHANGED,
            from_index=from_index,
            to_index=to_index,
            position=ordered[from_index].position,
        )

    if to_index > from_index:
        before = ordered[to_index].position
        after = ordered[to_index + 1].position if to_index + 1 < len(ordered) else None
    else:
        before = ordered[to_index - 1].position if to_index > 0 else None
        after = ordered[to_index].position

    if not has_gap(before, after):
        logger.warning(
            "todo.reorder gap_exhausted id=%s before=%s after=%s; rebalance positions",
            moving_id,
            before,
            after,
        )

    return ReorderOutcome(
        todo_id=moving_id,
        status=ReorderStatus.MOVED,
        from_index=from_index,
        to_index=to_index,
        position=between_position(before, after),
    )


def reorder_todo(ordered: Sequence[Todo], moving_id: int, target_index: int) -> ReorderOutcome:
    outcome = plan_reorder(ordered, moving_id, target_index)
    if not outcome.moved:
        logger.debug("todo.reorder %s id=%s", outcome.status.value, moving_id)
        return outcome

    if not store.set_todo_position(moving_id, outcome.position):
        # Deleted between the read of ``ordered`` and the write.
        return replace(outcome, status=ReorderStatus.NOT_FOUND)

    logger.info(
        "todo.reorder id=%s from=%s to=%s position=%s",
        moving_id,
        outcome.from_index,
        outcome.to_index,
        outcome.position,
    )
    return outcome
