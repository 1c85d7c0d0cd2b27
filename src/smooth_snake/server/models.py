"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateGameRequest(BaseModel):
    """Request body for POST /games. Omitted fields keep their defaults."""

    rows: int | None = Field(default=None, ge=4, le=200)
    cols: int | None = Field(default=None, ge=4, le=200)
    initial_tick_ms: int | None = Field(default=None, ge=20, le=2000)
    tick_step_ms: int | None = Field(default=None, ge=0, le=500)
    min_tick_ms: int | None = Field(default=None, ge=20, le=2000)
    frame_ms: int | None = Field(default=None, ge=5, le=200)
    food_reward: int | None = Field(default=None, ge=0)
    initial_length: int | None = Field(default=None, ge=1)
    seed: int | None = None


class InputRequest(BaseModel):
    """Request body for POST /games/{game_id}/input."""

    event: str = Field(min_length=1, max_length=16)


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    state: str
    score: int
    high_score: int
    rows: int
    cols: int
    tick_interval_ms: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
