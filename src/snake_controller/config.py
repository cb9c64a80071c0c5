"""Textual game configuration.

A configuration is a whitespace separated token stream::

    W <width> <height> F <food_x> <food_y> S <heading> <count> <x> <y> ...

``heading`` is one of ``U``, ``D``, ``L`` or ``R`` and the ``count``
segment coordinates are listed tail-first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from snake_controller.errors import ConfigurationError
from snake_controller.segments import Direction, Position

logger = logging.getLogger(__name__)

_WORLD_MARKER = "W"
_FOOD_MARKER = "F"
_SCORE_MARKER = "S"


class _Tokens:
    """Cursor over configuration tokens that fails with ConfigurationError."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ConfigurationError(f"Missing {what}.") from None

    def marker(self, expected: str) -> None:
        token = self.next(f"'{expected}' marker")
        if token != expected:
            raise ConfigurationError(
                f"Expected '{expected}' marker, got {token!r}.",
            )

    def integer(self, what: str) -> int:
        token = self.next(what)
        try:
            return int(token)
        except ValueError:
            raise ConfigurationError(
                f"Expected integer {what}, got {token!r}.",
            ) from None


@dataclass(frozen=True)
class GameConfig:
    """Initial world, food, heading and body of a game.

    ``segments`` are stored tail-first, exactly as they appear in the text.
    """

    width: int
    height: int
    food: Position
    direction: Direction
    segments: tuple[Position, ...]

    @classmethod
    def parse(cls, text: str) -> GameConfig:
        """Parse the textual format, raising ConfigurationError on any defect."""
        tokens = _Tokens(text)

        tokens.marker(_WORLD_MARKER)
        width = tokens.integer("width")
        height = tokens.integer("height")
        if width < 1 or height < 1:
            raise ConfigurationError("Width and height must be at least 1.")

        tokens.marker(_FOOD_MARKER)
        food = Position(tokens.integer("food x"), tokens.integer("food y"))

        tokens.marker(_SCORE_MARKER)

        heading = tokens.next("heading")
        try:
            direction = Direction.from_char(heading)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

        count = tokens.integer("segment count")
        if count < 0:
            raise ConfigurationError("Segment count must not be negative.")
        segments = tuple(
            Position(
                tokens.integer(f"segment {i} x"),
                tokens.integer(f"segment {i} y"),
            )
            for i in range(count)
        )

        return cls(
            width=width,
            height=height,
            food=food,
            direction=direction,
            segments=segments,
        )

    @classmethod
    def default(cls, width: int = 20, height: int = 20) -> GameConfig:
        """Three segments centred on the map heading right, food two cells ahead."""
        if width < 4 or height < 4:
            raise ConfigurationError("Default layout needs at least 4×4 cells.")
        head_x, y = width // 2, height // 2
        segments = tuple(Position(head_x - i, y) for i in (2, 1, 0))
        food = Position(min(head_x + 2, width - 1), y)
        return cls(
            width=width,
            height=height,
            food=food,
            direction=Direction.RIGHT,
            segments=segments,
        )

    def to_text(self) -> str:
        """Render back to the textual format."""
        parts = [
            _WORLD_MARKER, str(self.width), str(self.height),
            _FOOD_MARKER, str(self.food.x), str(self.food.y),
            _SCORE_MARKER, self.direction.char, str(len(self.segments)),
        ]
        for x, y in self.segments:
            parts.extend((str(x), str(y)))
        return " ".join(parts)

    def save(self, path: str | Path) -> None:
        """Write the configuration text to *path*."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.to_text() + "\n")
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load and parse a configuration file."""
        return cls.parse(Path(path).read_text())
