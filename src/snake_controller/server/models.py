"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game instance."""

    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


class CreateGameRequest(BaseModel):
    """Request body for POST /games.

    ``config`` takes precedence over ``width``/``height``.
    """

    config: str | None = Field(default=None, min_length=1)
    width: int = Field(default=20, ge=4, le=200)
    height: int = Field(default=20, ge=4, le=200)
    tick_rate_ms: int = Field(default=200, ge=50, le=2000)
    food_relocate_ticks: int = Field(default=0, ge=0)
    seed: int | None = None


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    status: GameStatus
    width: int
    height: int
    tick_rate_ms: int
    score: int
