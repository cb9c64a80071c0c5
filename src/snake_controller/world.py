"""World bounds and food location."""

from __future__ import annotations

from dataclasses import dataclass

from snake_controller.segments import Position


@dataclass(frozen=True)
class Dimension:
    """Width and height of the playing field."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Dimension width and height must be at least 1.")


class World:
    """Fixed-size map holding the current food position.

    The food position is stored as given; keeping it on the map is the
    caller's job.
    """

    def __init__(self, dimension: Dimension, food: Position) -> None:
        self.dimension = dimension
        self._food = food

    def set_food_position(self, position: Position) -> None:
        self._food = position

    def get_food_position(self) -> Position:
        return self._food

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the world."""
        return 0 <= x < self.dimension.width and 0 <= y < self.dimension.height
