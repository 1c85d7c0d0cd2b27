"""WebSocket handler streaming snapshots to a remote renderer."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from smooth_snake.controls import parse_event
from smooth_snake.server.session_manager import SessionManager, encode_snapshot

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Send input events, receive a snapshot every frame."""
    manager = _get_manager(websocket)
    instance = manager.get_session(game_id)
    if instance is None:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()

    # Send the current snapshot so the client can draw immediately.
    await websocket.send_text(encode_snapshot(instance.session.snapshot()))
    instance.sockets.append(websocket)
    logger.info("Renderer connected to game %s.", game_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            text = msg.get("event")
            if not isinstance(text, str):
                continue

            event = parse_event(text)
            if event is None:
                continue

            try:
                await manager.apply_input(game_id, event)
            except KeyError:
                break
    except WebSocketDisconnect:
        logger.info("Renderer disconnected from game %s.", game_id)
    finally:
        if websocket in instance.sockets:
            instance.sockets.remove(websocket)
