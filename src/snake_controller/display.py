"""NumPy-backed display board fed by controller notifications."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_controller.events import Cell, DisplayInd, Event
from snake_controller.segments import Position

if TYPE_CHECKING:
    from snake_controller.config import GameConfig

logger = logging.getLogger(__name__)

_GLYPHS: dict[Cell, str] = {
    Cell.FREE: ".",
    Cell.SNAKE: "#",
    Cell.FOOD: "@",
}


class DisplayBoard:
    """Display port that mirrors the cells the controller reports.

    Cells are stored as ``int8`` codes in an array shaped
    ``(height, width)`` and indexed ``[y, x]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be at least 1×1.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def send(self, event: Event) -> None:
        if not isinstance(event, DisplayInd):
            raise TypeError(
                f"Display board cannot handle {type(event).__name__}.",
            )
        x, y = event.position
        if not self.in_bounds(x, y):
            logger.debug("Ignored off-board cell %s.", (x, y))
            return
        self.cells[y, x] = event.value

    def paint(self, config: GameConfig) -> None:
        """Draw the initial snake and food of *config*."""
        self.clear()
        for x, y in config.segments:
            if self.in_bounds(x, y):
                self.cells[y, x] = Cell.SNAKE
        fx, fy = config.food
        if self.in_bounds(fx, fy):
            self.cells[fy, fx] = Cell.FOOD

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """Reset all cells to free."""
        self.cells[:] = Cell.FREE

    def get(self, x: int, y: int) -> Cell:
        return Cell(self.cells[y, x])

    def free_cells(self) -> list[Position]:
        """Return every free cell, row by row."""
        ys, xs = np.where(self.cells == Cell.FREE)
        return [
            Position(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]

    def render(self) -> str:
        """Return the board as lines of ASCII glyphs."""
        return "\n".join(
            "".join(_GLYPHS[Cell(v)] for v in row) for row in self.cells.tolist()
        )

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
