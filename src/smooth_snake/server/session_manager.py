"""In-memory session registry and async frame loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from smooth_snake.clock import monotonic_ms
from smooth_snake.config import GameConfig
from smooth_snake.controls import InputEvent
from smooth_snake.engine import GameState, Snapshot
from smooth_snake.server.models import GameSummary
from smooth_snake.session import GameSession

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 32


class CapacityError(RuntimeError):
    """Raised when no more sessions can be hosted."""


@dataclass
class SessionInstance:
    """A hosted game session and its connected renderers."""

    game_id: str
    session: GameSession
    sockets: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    def summary(self) -> GameSummary:
        engine = self.session.engine
        return GameSummary(
            game_id=self.game_id,
            state=engine.state.value,
            score=engine.score,
            high_score=engine.high_score,
            rows=engine.grid.rows,
            cols=engine.grid.cols,
            tick_interval_ms=engine.tick_interval_ms,
        )


def encode_snapshot(snapshot: Snapshot) -> str:
    """Compact JSON for the wire."""
    return json.dumps(snapshot.to_dict(), separators=(",", ":"))


class SessionManager:
    """Central registry running one frame loop per hosted session."""

    def __init__(
        self,
        base_config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._base_config = base_config or GameConfig()
        self._max_sessions = max_sessions
        self._sessions: dict[str, SessionInstance] = {}

    def create_session(self, **overrides) -> SessionInstance:
        """Create a session and start its frame loop.

        Must be called with a running event loop.
        """
        if len(self._sessions) >= self._max_sessions:
            self._prune_finished_sessions()
        if len(self._sessions) >= self._max_sessions:
            raise CapacityError("Too many active games. Try again later.")

        config = self._base_config.with_overrides(**overrides)
        game_id = uuid.uuid4().hex[:12]
        instance = SessionInstance(
            game_id=game_id,
            session=GameSession(config, now_ms=monotonic_ms()),
        )
        self._sessions[game_id] = instance
        instance._task = asyncio.create_task(self._frame_loop(instance))
        logger.info(
            "Game %s created (%dx%d).", game_id, config.rows, config.cols,
        )
        return instance

    def get_session(self, game_id: str) -> SessionInstance | None:
        return self._sessions.get(game_id)

    def list_sessions(self) -> list[GameSummary]:
        return [s.summary() for s in self._sessions.values()]

    async def apply_input(self, game_id: str, event: InputEvent) -> Snapshot:
        """Feed an input event into a session and return its snapshot."""
        instance = self._sessions.get(game_id)
        if instance is None:
            raise KeyError(f"Game {game_id} not found.")
        async with instance.lock:
            instance.session.handle(event, monotonic_ms())
            return instance.session.snapshot()

    async def remove_session(self, game_id: str) -> None:
        """Stop a session's loop, close its sockets, and forget it."""
        instance = self._sessions.pop(game_id, None)
        if instance is None:
            raise KeyError(f"Game {game_id} not found.")
        await self._stop(instance)
        logger.info("Game %s removed.", game_id)

    async def _frame_loop(self, instance: SessionInstance) -> None:
        """Run render frames, broadcasting a snapshot each frame."""
        frame_interval = instance.session.config.frame_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(frame_interval)
                async with instance.lock:
                    snapshot = instance.session.frame(monotonic_ms())
                self._track_finished(instance, snapshot)
                if instance.sockets:
                    await self._broadcast(instance, snapshot)
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled for game %s.", instance.game_id)
        except Exception:
            logger.exception("Frame loop error in game %s.", instance.game_id)

    def _track_finished(self, instance: SessionInstance, snapshot: Snapshot) -> None:
        if snapshot.state != GameState.GAME_OVER:
            instance.finished_at = None
        elif instance.finished_at is None:
            instance.finished_at = time.monotonic()

    def _prune_finished_sessions(self) -> None:
        """Drop the oldest finished game with no connected renderer."""
        finished = [
            s for s in self._sessions.values()
            if s.finished_at is not None and not s.sockets
        ]
        if not finished:
            return

        stale = min(finished, key=lambda s: s.finished_at)
        self._sessions.pop(stale.game_id, None)
        if stale._task is not None and not stale._task.done():
            stale._task.cancel()
        logger.info("Pruned finished game %s to free a slot.", stale.game_id)

    async def _broadcast(self, instance: SessionInstance, snapshot: Snapshot) -> None:
        """Send the snapshot to every connected renderer."""
        payload = encode_snapshot(snapshot)
        dead: list[WebSocket] = []

        # Iterate over a copy so disconnect handlers can mutate the live list.
        for ws in list(instance.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in instance.sockets:
                instance.sockets.remove(ws)

    async def _stop(self, instance: SessionInstance) -> None:
        task = instance._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        for ws in list(instance.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game closed.")
            except Exception:
                logger.warning("Failed closing socket in game %s.", instance.game_id)
        instance.sockets.clear()

    async def cleanup(self) -> None:
        """Cancel all frame loops and drop every session."""
        instances = list(self._sessions.values())
        self._sessions.clear()
        for instance in instances:
            await self._stop(instance)
        logger.info("SessionManager cleanup complete.")
