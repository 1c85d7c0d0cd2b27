"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from smooth_snake.config import GameConfig
from smooth_snake.server.routes import router
from smooth_snake.server.session_manager import SessionManager
from smooth_snake.server.websocket import ws_router


def create_app(base_config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session_manager = SessionManager(base_config)
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(
        title="Smooth Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
