"""Snake controller: event-driven core of a snake arcade game."""

from snake_controller.config import GameConfig
from snake_controller.controller import Controller
from snake_controller.errors import (
    ConfigurationError,
    SnakeError,
    UnexpectedEventError,
)
from snake_controller.events import (
    Cell,
    DirectionInd,
    DisplayInd,
    FoodInd,
    FoodReq,
    FoodResp,
    LooseInd,
    PauseInd,
    ScoreInd,
    TimeoutInd,
)
from snake_controller.ports import Port, RecordingPort
from snake_controller.segments import Direction, Position, Segments
from snake_controller.session import GameSession
from snake_controller.world import Dimension, World

__all__ = [
    "Cell",
    "ConfigurationError",
    "Controller",
    "Dimension",
    "Direction",
    "DirectionInd",
    "DisplayInd",
    "FoodInd",
    "FoodReq",
    "FoodResp",
    "GameConfig",
    "GameSession",
    "LooseInd",
    "PauseInd",
    "Port",
    "Position",
    "RecordingPort",
    "ScoreInd",
    "Segments",
    "SnakeError",
    "TimeoutInd",
    "UnexpectedEventError",
    "World",
]
