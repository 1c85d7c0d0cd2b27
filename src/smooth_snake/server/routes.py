"""REST API route handlers for game lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from smooth_snake.controls import parse_event
from smooth_snake.server.models import (
    CreateGameRequest,
    ErrorResponse,
    GameSummary,
    InputRequest,
)
from smooth_snake.server.session_manager import CapacityError, SessionManager

router = APIRouter(prefix="/games", tags=["games"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201, responses={429: {"model": ErrorResponse}})
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create and start a new game."""
    manager = _get_manager(request)
    try:
        instance = manager.create_session(**body.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except CapacityError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    return instance.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List hosted games."""
    return _get_manager(request).list_sessions()


@router.get("/{game_id}", responses=_NOT_FOUND)
async def get_game(game_id: str, request: Request) -> dict:
    """Get game summary and the current snapshot."""
    instance = _get_manager(request).get_session(game_id)
    if instance is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    result = instance.summary().model_dump()
    result["snapshot"] = instance.session.snapshot().to_dict()
    return result


@router.post("/{game_id}/input", responses=_NOT_FOUND)
async def send_input(game_id: str, body: InputRequest, request: Request) -> dict:
    """Apply one input event and return the resulting snapshot."""
    event = parse_event(body.event)
    if event is None:
        raise HTTPException(status_code=422, detail=f"Unknown event '{body.event}'.")
    try:
        snapshot = await _get_manager(request).apply_input(game_id, event)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return snapshot.to_dict()


@router.delete("/{game_id}", status_code=204, responses=_NOT_FOUND)
async def delete_game(game_id: str, request: Request) -> Response:
    """Stop and discard a game."""
    try:
        await _get_manager(request).remove_session(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
