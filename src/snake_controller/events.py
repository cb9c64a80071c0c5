"""Inbound events and outbound notifications exchanged with the controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_controller.segments import Direction, Position


class Cell(enum.IntEnum):
    """Values a display cell can take."""

    FREE = 0
    SNAKE = 1
    FOOD = 2


class Event:
    """Base class for every message passed to or from the controller."""

    type_name: str = "event"

    def to_dict(self) -> dict:
        return {"type": self.type_name}


# --- inbound ---

@dataclass(frozen=True)
class TimeoutInd(Event):
    """Timer tick: advance the snake by one cell."""

    type_name = "timeout"


@dataclass(frozen=True)
class DirectionInd(Event):
    """Change of heading for the next move."""

    direction: Direction
    type_name = "direction"

    def to_dict(self) -> dict:
        return {"type": self.type_name, "direction": self.direction.char}


@dataclass(frozen=True)
class FoodInd(Event):
    """Unsolicited food placement proposal."""

    position: Position
    type_name = "food_ind"

    def to_dict(self) -> dict:
        return {"type": self.type_name, "position": list(self.position)}


@dataclass(frozen=True)
class FoodResp(Event):
    """Food placement answering a :class:`FoodReq`."""

    position: Position
    type_name = "food_resp"

    def to_dict(self) -> dict:
        return {"type": self.type_name, "position": list(self.position)}


@dataclass(frozen=True)
class PauseInd(Event):
    """Toggle between running and paused."""

    type_name = "pause"


# --- outbound ---

@dataclass(frozen=True)
class DisplayInd(Event):
    """Set a single display cell to *value*."""

    position: Position
    value: Cell
    type_name = "display"

    def to_dict(self) -> dict:
        return {
            "type": self.type_name,
            "position": list(self.position),
            "value": self.value.name,
        }


@dataclass(frozen=True)
class FoodReq(Event):
    """Ask the food collaborator for a new food position."""

    type_name = "food_req"


@dataclass(frozen=True)
class ScoreInd(Event):
    """The snake has eaten."""

    type_name = "score"


@dataclass(frozen=True)
class LooseInd(Event):
    """The attempted move was illegal and the round is lost."""

    type_name = "loose"
