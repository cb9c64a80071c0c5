"""REST API route handlers for game lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_controller.server.models import CreateGameRequest, GameSummary

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request):
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a new game from a config string or a default layout."""
    manager = _get_manager(request)
    try:
        game = manager.create_game(
            config=body.config,
            width=body.width,
            height=body.height,
            tick_rate_ms=body.tick_rate_ms,
            food_relocate_ticks=body.food_relocate_ticks,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return game.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List waiting and active games."""
    return _get_manager(request).list_games()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get game metadata and the current session state."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    result = game.summary().model_dump(mode="json")
    result["state"] = game.session.get_state()
    return result


@router.post("/{game_id}/start", status_code=200)
async def start_game(game_id: str, request: Request) -> dict:
    """Start the timer driving the game."""
    manager = _get_manager(request)
    try:
        manager.start_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"status": "started", "game_id": game_id}


@router.post("/{game_id}/pause", status_code=200)
async def pause_game(game_id: str, request: Request) -> dict:
    """Toggle pause on a running game."""
    manager = _get_manager(request)
    try:
        paused = await manager.toggle_pause(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"game_id": game_id, "paused": paused}
