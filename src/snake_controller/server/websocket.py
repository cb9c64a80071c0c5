"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from snake_controller.segments import Direction
from snake_controller.server.game_manager import GameManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()

_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _get_manager(ws: WebSocket) -> GameManager:
    return ws.app.state.game_manager


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Player WebSocket: send directions or pause, receive state each tick."""
    manager = _get_manager(websocket)
    game = manager.get_game(game_id)
    if game is None:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    game.players.append(websocket)
    logger.info("Player connected to game %s.", game_id)

    # Send initial state snapshot so the client gets immediate feedback.
    async with game.lock:
        state = game.session.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("pause") is True:
                try:
                    await manager.toggle_pause(game_id)
                except ValueError:
                    logger.debug("Ignored pause for inactive game %s.", game_id)
                continue

            direction_str = msg.get("direction")
            if not isinstance(direction_str, str):
                continue
            direction = _DIRECTION_MAP.get(direction_str.lower())
            if direction is None:
                continue
            await manager.turn(game_id, direction)
    except WebSocketDisconnect:
        logger.info("Player disconnected from game %s.", game_id)
    finally:
        if websocket in game.players:
            game.players.remove(websocket)
