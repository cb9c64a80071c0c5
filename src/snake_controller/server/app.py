"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_controller.server.game_manager import GameManager
from snake_controller.server.routes import router
from snake_controller.server.websocket import ws_router


def create_app(game_manager: GameManager | None = None) -> FastAPI:
    """Build the application around *game_manager*.

    A fresh registry is used when none is given. Its tick loops are
    cancelled when the application shuts down.
    """
    manager = game_manager if game_manager is not None else GameManager()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await manager.cleanup()

    app = FastAPI(
        title="Snake Controller API", version="0.1.0", lifespan=lifespan,
    )
    app.state.game_manager = manager
    app.include_router(router)
    app.include_router(ws_router)
    return app
