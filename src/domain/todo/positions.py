"""Ordering keys for todos.

Positions are integers spaced ``STEP`` apart on append. Moving an item only
rewrites its own position, using the midpoint of its new neighbours. Once two
neighbours are adjacent integers the midpoint collapses onto one of them;
``has_gap`` reports that case, and a full renumbering is left to an explicit
rebalance.
"""
from __future__ import annotations

from typing import Optional

STEP = 1000
DEFAULT_POSITION = STEP


def next_append_position(current_max: Optional[int]) -> int:
    if current_max is None:
        return DEFAULT_POSITION
    return current_max + STEP


def between_position(before: Optional[int], after: Optional[int]) -> int:
    """Return a position that sorts between ``before`` and ``after``.

    ``None`` marks a list boundary. The caller guarantees ``before <= after``
    when both are given.
    """
    if before is None and after is None:
        return DEFAULT_POSITION
    if before is None:
        return after // 2
    if after is None:
        return before + STEP
    return (before + after) // 2


def has_gap(before: Optional[int], after: Optional[int]) -> bool:
    """True when ``between_position`` yields a value strictly inside the bounds."""
    if before is None and after is None:
        return True
    if before is None:
        return after // 2 < after
    if after is None:
        return True
    return after - before > 1


def spread_positions(count: int) -> list[int]:
    return [STEP * (index + 1) for index in range(count)]
