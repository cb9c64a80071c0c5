"""Random food placement."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from snake_controller.display import DisplayBoard
from snake_controller.events import Event, FoodInd, FoodReq, FoodResp
from snake_controller.segments import Position

logger = logging.getLogger(__name__)


class FoodGenerator:
    """Food port that answers requests with a random free board cell.

    Answers are handed to *deliver* rather than to the controller directly,
    so the caller decides when the controller sees them. Uses a seeded NumPy
    RNG for reproducible placement.
    """

    def __init__(
        self,
        board: DisplayBoard,
        deliver: Callable[[Event], None],
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.deliver = deliver
        self.rng = rng if rng is not None else np.random.default_rng()
        self.requests = 0

    def send(self, event: Event) -> None:
        if not isinstance(event, FoodReq):
            raise TypeError(
                f"Food generator cannot handle {type(event).__name__}.",
            )
        self.requests += 1
        position = self._pick()
        if position is not None:
            self.deliver(FoodResp(position))

    def propose(self) -> FoodInd | None:
        """Build an unsolicited food proposal, or ``None`` if the board is full."""
        position = self._pick()
        return FoodInd(position) if position is not None else None

    def _pick(self) -> Position | None:
        free = self.board.free_cells()
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]
