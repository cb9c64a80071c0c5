"""Single-player game session wiring the controller to its collaborators."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from snake_controller.config import GameConfig
from snake_controller.controller import Controller
from snake_controller.display import DisplayBoard
from snake_controller.events import (
    DirectionInd,
    Event,
    PauseInd,
    TimeoutInd,
)
from snake_controller.food import FoodGenerator
from snake_controller.ports import Port
from snake_controller.score import ScoreKeeper
from snake_controller.segments import Direction

logger = logging.getLogger(__name__)


class _TeePort:
    """Forward to *target* while logging every event into *sink*."""

    def __init__(self, target: Port, sink: list[Event]) -> None:
        self._target = target
        self._sink = sink

    def send(self, event: Event) -> None:
        self._sink.append(event)
        self._target.send(event)


class GameSession:
    """Delivers events to a :class:`Controller` one at a time.

    Inbound events are queued in a FIFO inbox. Food responses produced
    while the controller handles an event are queued behind it, so the
    controller never sees a second event before the first completes.
    """

    def __init__(
        self,
        config: str | GameConfig,
        seed: int | None = None,
    ) -> None:
        if isinstance(config, str):
            config = GameConfig.parse(config)
        self.config = config

        self.board = DisplayBoard(config.width, config.height)
        self.board.paint(config)
        self.scores = ScoreKeeper()
        self.rng = np.random.default_rng(seed)
        self._inbox: deque[Event] = deque()
        self.food_generator = FoodGenerator(
            self.board, deliver=self._inbox.append, rng=self.rng,
        )

        self._emitted: list[Event] = []
        self.controller = Controller(
            _TeePort(self.board, self._emitted),
            _TeePort(self.food_generator, self._emitted),
            _TeePort(self.scores, self._emitted),
            config,
        )
        self.tick_count = 0

    @property
    def lost(self) -> bool:
        return self.scores.lost

    @property
    def paused(self) -> bool:
        return self.controller.paused

    def dispatch(self, event: Event) -> list[Event]:
        """Queue *event*, drain the inbox and return everything emitted."""
        self._emitted.clear()
        self._inbox.append(event)
        try:
            while self._inbox:
                self.controller.receive(self._inbox.popleft())
        except Exception:
            self._inbox.clear()
            self._emitted.clear()
            raise
        emitted = list(self._emitted)
        self._emitted.clear()
        return emitted

    def tick(self) -> list[Event]:
        """Advance one timer tick. Does nothing once the round is lost."""
        if self.lost:
            return []
        emitted = self.dispatch(TimeoutInd())
        if not self.paused:
            self.tick_count += 1
        if self.lost:
            logger.info(
                "Session finished after %d ticks with score %d.",
                self.tick_count, self.scores.score,
            )
        return emitted

    def turn(self, direction: Direction) -> list[Event]:
        return self.dispatch(DirectionInd(direction))

    def toggle_pause(self) -> list[Event]:
        return self.dispatch(PauseInd())

    def relocate_food(self) -> list[Event]:
        """Propose a fresh food cell as if from a periodic spawner."""
        proposal = self.food_generator.propose()
        if proposal is None:
            return []
        return self.dispatch(proposal)

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "tick": self.tick_count,
            "score": self.scores.score,
            "lost": self.scores.lost,
            "paused": self.controller.paused,
            "direction": self.controller.direction.char,
            "snake": [list(p) for p in self.controller.body],
            "food": list(self.controller.food_position),
            "board": self.board.to_dict(),
        }
