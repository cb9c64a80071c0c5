"""Event-driven snake controller."""

from __future__ import annotations

import logging
from collections.abc import Callable

from snake_controller.config import GameConfig
from snake_controller.errors import UnexpectedEventError
from snake_controller.events import (
    Cell,
    DirectionInd,
    DisplayInd,
    Event,
    FoodInd,
    FoodReq,
    FoodResp,
    LooseInd,
    PauseInd,
    ScoreInd,
    TimeoutInd,
)
from snake_controller.ports import Port
from snake_controller.segments import Direction, Position, Segments
from snake_controller.world import Dimension, World

logger = logging.getLogger(__name__)


class Controller:
    """Owns the world and the snake and reacts to one event at a time.

    Every change is reported through three ports: cell updates go to
    *display_port*, food requests to *food_port*, and score and loss
    notifications to *score_port*.
    """

    def __init__(
        self,
        display_port: Port,
        food_port: Port,
        score_port: Port,
        config: str | GameConfig,
    ) -> None:
        self._display_port = display_port
        self._food_port = food_port
        self._score_port = score_port
        self._paused = False

        if isinstance(config, str):
            config = GameConfig.parse(config)

        self._world = World(Dimension(config.width, config.height), config.food)
        self._segments = Segments(config.direction)
        for position in config.segments:
            self._segments.add_segment(position)

        self._handlers: dict[type[Event], Callable[[Event], None]] = {
            TimeoutInd: self._handle_timeout,
            DirectionInd: self._handle_direction,
            FoodInd: self._handle_food_ind,
            FoodResp: self._handle_food_resp,
            PauseInd: self._handle_pause,
        }

    # --- read-only views ---

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def dimension(self) -> Dimension:
        return self._world.dimension

    @property
    def food_position(self) -> Position:
        return self._world.get_food_position()

    @property
    def direction(self) -> Direction:
        return self._segments.direction

    @property
    def body(self) -> tuple[Position, ...]:
        """Snake body, tail-first."""
        return self._segments.positions()

    # --- dispatch ---

    def receive(self, event: Event) -> None:
        """Process a single inbound event to completion.

        Raises UnexpectedEventError for anything that is not one of the
        five inbound event types.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise UnexpectedEventError(event)
        if self._paused and isinstance(event, (TimeoutInd, DirectionInd)):
            logger.debug("Dropped %s while paused.", type(event).__name__)
            return
        handler(event)

    def _handle_timeout(self, event: Event) -> None:
        self._move(self._segments.next_head())

    def _handle_direction(self, event: Event) -> None:
        self._segments.update_direction(event.direction)

    def _handle_food_ind(self, event: Event) -> None:
        self._update_food(event.position, clear_old=True)

    def _handle_food_resp(self, event: Event) -> None:
        # The previous food was eaten, so there is no food cell to clear.
        self._update_food(event.position, clear_old=False)

    def _handle_pause(self, event: Event) -> None:
        self._paused = not self._paused
        logger.debug("Controller %s.", "paused" if self._paused else "resumed")

    # --- movement ---

    def _is_blocked(self, position: Position) -> bool:
        return (
            self._segments.is_collision(position)
            or not self._world.contains(position.x, position.y)
        )

    def _move(self, position: Position) -> None:
        if self._is_blocked(position):
            logger.debug("Illegal move to %s.", tuple(position))
            self._score_port.send(LooseInd())
            return

        self._add_head(position)
        if position == self._world.get_food_position():
            self._score_port.send(ScoreInd())
            self._food_port.send(FoodReq())
        else:
            self._remove_tail()

    def _add_head(self, position: Position) -> None:
        self._segments.add_head(position)
        self._display_port.send(DisplayInd(position, Cell.SNAKE))

    def _remove_tail(self) -> None:
        tail = self._segments.remove_tail()
        self._display_port.send(DisplayInd(tail, Cell.FREE))

    # --- food ---

    def _update_food(self, position: Position, clear_old: bool) -> None:
        position = Position(*position)
        if self._is_blocked(position):
            logger.debug("Rejected food at %s.", tuple(position))
            self._food_port.send(FoodReq())
            return

        if clear_old:
            self._display_port.send(
                DisplayInd(self._world.get_food_position(), Cell.FREE),
            )
        self._world.set_food_position(position)
        self._display_port.send(DisplayInd(position, Cell.FOOD))
