"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from torus_snake.config import GameConfig
from torus_snake.server.hub import SessionHub
from torus_snake.server.routes import router
from torus_snake.server.websocket import ws_router


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.hub = SessionHub(config)
        app.state.hub.start()
        yield
        await app.state.hub.cleanup()

    app = FastAPI(
        title="Torus Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
