"""Snake body representation and movement."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator
from typing import NamedTuple


class Position(NamedTuple):
    """An (x, y) cell coordinate."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values.

    ``y`` grows downwards, so UP decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_char(cls, char: str) -> Direction:
        """Parse a single-letter heading (``U``, ``D``, ``L`` or ``R``)."""
        try:
            return _BY_CHAR[char]
        except KeyError:
            raise ValueError(f"Unknown direction character {char!r}.") from None

    @property
    def char(self) -> str:
        return self.name[0]


_BY_CHAR: dict[str, Direction] = {d.name[0]: d for d in Direction}


class Segments:
    """Ordered body of the snake plus its current heading.

    Positions are kept tail-first: ``body[0]`` is the tail and
    ``body[-1]`` the head.
    """

    def __init__(self, direction: Direction) -> None:
        self._direction = direction
        self._body: deque[Position] = deque()

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def head(self) -> Position:
        """Return the head position."""
        return self._body[-1]

    @property
    def tail(self) -> Position:
        """Return the tail position."""
        return self._body[0]

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def positions(self) -> tuple[Position, ...]:
        """Return the body tail-first."""
        return tuple(self._body)

    def add_segment(self, position: Position) -> None:
        """Extend the body during setup.

        Segments arrive tail-first, so each call places a segment one step
        closer to the head.
        """
        self._body.append(Position(*position))

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        dx, dy = self._direction.value
        x, y = self.head
        return Position(x + dx, y + dy)

    def is_collision(self, position: Position) -> bool:
        """Check whether any body segment occupies *position*."""
        return Position(*position) in self._body

    def add_head(self, position: Position) -> None:
        self._body.append(Position(*position))

    def remove_tail(self) -> Position:
        """Drop the tail segment and return the cell it vacated."""
        return self._body.popleft()

    def update_direction(self, direction: Direction) -> None:
        # No reversal guard: a 180° turn collides on the next tick.
        self._direction = direction

    def to_dict(self) -> dict:
        """Serialize the body (tail-first) and heading."""
        return {
            "body": [list(p) for p in self._body],
            "direction": self._direction.char,
        }
