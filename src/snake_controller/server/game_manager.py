"""In-memory game registry, lifecycle management, and async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from snake_controller.config import GameConfig
from snake_controller.segments import Direction
from snake_controller.server.models import GameStatus, GameSummary
from snake_controller.session import GameSession

logger = logging.getLogger(__name__)

_MAX_FINISHED_GAMES = 100


@dataclass
class GameInstance:
    """All state for a single game."""

    game_id: str
    session: GameSession
    tick_rate_ms: int
    food_relocate_ticks: int = 0
    status: GameStatus = GameStatus.WAITING
    players: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            status=self.status,
            width=self.session.config.width,
            height=self.session.config.height,
            tick_rate_ms=self.tick_rate_ms,
            score=self.session.scores.score,
        )


class GameManager:
    """Central registry managing all game instances."""

    def __init__(self, max_finished_games: int = _MAX_FINISHED_GAMES) -> None:
        if max_finished_games < 0:
            raise ValueError("max_finished_games must be >= 0.")
        self._games: dict[str, GameInstance] = {}
        self._max_finished_games = max_finished_games

    def create_game(
        self,
        config: str | None = None,
        width: int = 20,
        height: int = 20,
        tick_rate_ms: int = 200,
        food_relocate_ticks: int = 0,
        seed: int | None = None,
    ) -> GameInstance:
        """Create a new game and return the instance.

        Raises ConfigurationError (a ValueError) for unusable configs.
        """
        game_config = (
            GameConfig.parse(config) if config is not None
            else GameConfig.default(width, height)
        )
        game_id = uuid.uuid4().hex[:12]
        instance = GameInstance(
            game_id=game_id,
            session=GameSession(game_config, seed=seed),
            tick_rate_ms=tick_rate_ms,
            food_relocate_ticks=food_relocate_ticks,
        )
        self._games[game_id] = instance
        logger.info(
            "Game %s created (%dx%d).",
            game_id, game_config.width, game_config.height,
        )
        return instance

    def get_game(self, game_id: str) -> GameInstance | None:
        return self._games.get(game_id)

    def list_games(self) -> list[GameSummary]:
        """Return summaries of non-finished games."""
        return [
            g.summary() for g in self._games.values()
            if g.status != GameStatus.FINISHED
        ]

    def _require(self, game_id: str) -> GameInstance:
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        return game

    def start_game(self, game_id: str) -> None:
        """Start the game tick loop."""
        game = self._require(game_id)
        if game.status != GameStatus.WAITING:
            raise ValueError("Game is not in waiting state.")
        game.status = GameStatus.ACTIVE
        game._task = asyncio.create_task(self._tick_loop(game))
        logger.info("Game %s started.", game_id)

    async def turn(self, game_id: str, direction: Direction) -> None:
        """Forward a heading change to an active game."""
        game = self._require(game_id)
        async with game.lock:
            if game.status == GameStatus.ACTIVE:
                game.session.turn(direction)

    async def toggle_pause(self, game_id: str) -> bool:
        """Toggle pause on an active game and return the new paused flag."""
        game = self._require(game_id)
        async with game.lock:
            if game.status != GameStatus.ACTIVE:
                raise ValueError("Game is not active.")
            game.session.toggle_pause()
            return game.session.paused

    async def _tick_loop(self, game: GameInstance) -> None:
        """Run the game tick loop, broadcasting state each tick."""
        tick_interval = game.tick_rate_ms / 1000.0
        session = game.session
        try:
            while game.status == GameStatus.ACTIVE:
                await asyncio.sleep(tick_interval)
                async with game.lock:
                    session.tick()
                    if (
                        game.food_relocate_ticks
                        and not session.lost
                        and not session.paused
                        and session.tick_count % game.food_relocate_ticks == 0
                    ):
                        session.relocate_food()
                    if session.lost:
                        self._mark_game_finished(game)
                    state = session.get_state()
                await self._broadcast(game, state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for game %s.", game.game_id)
        except Exception:
            logger.exception("Tick loop error in game %s.", game.game_id)
            self._mark_game_finished(game)
        finally:
            if game.status == GameStatus.FINISHED:
                await self._close_connections(game)
                self._prune_finished_games()

    def _mark_game_finished(self, game: GameInstance) -> None:
        """Transition a game to finished exactly once."""
        if game.status != GameStatus.FINISHED:
            game.status = GameStatus.FINISHED
            game.finished_at = time.monotonic()

    async def _close_connections(self, game: GameInstance) -> None:
        """Close any live player sockets for a finished game."""
        for ws in list(game.players):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game finished.")
            except Exception:
                logger.warning("Failed closing player socket in game %s.", game.game_id)
        game.players.clear()

    def _prune_finished_games(self) -> None:
        """Bound retained finished games to avoid unbounded registry growth."""
        finished_games = [
            g for g in self._games.values() if g.status == GameStatus.FINISHED
        ]
        overflow = len(finished_games) - self._max_finished_games
        if overflow <= 0:
            return

        finished_games.sort(
            key=lambda g: g.finished_at if g.finished_at is not None else g.created_at,
        )
        for stale in finished_games[:overflow]:
            self._games.pop(stale.game_id, None)
        logger.info(
            "Pruned %d finished games (retaining up to %d).",
            overflow,
            self._max_finished_games,
        )

    async def _broadcast(self, game: GameInstance, state: dict) -> None:
        """Send game state to all connected players."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(game.players):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in game.players:
                game.players.remove(ws)

    async def cleanup(self) -> None:
        """Cancel all running tick loops."""
        tasks = [
            g._task for g in self._games.values()
            if g._task and not g._task.done()
        ]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("GameManager cleanup complete.")
