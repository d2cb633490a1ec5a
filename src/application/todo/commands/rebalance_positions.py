from __future__ import annotations

from application.todo.store import rebalance_positions


class RebalancePositionsCommand:
    """Renumber every todo to evenly spaced positions, keeping the order."""

    def execute(self) -> int:
        return rebalance_positions()
