"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from grid_snake.server.routes import router
from grid_snake.server.session_manager import SessionManager
from grid_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


def create_app(max_sessions: int = 100) -> FastAPI:
    """Build the FastAPI application.

    Each app gets its own :class:`SessionManager`; every session still open
    at shutdown has its tick loop cancelled.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.session_manager = SessionManager(max_sessions=max_sessions)
        logger.info("Serving up to %d sessions.", max_sessions)
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(
        title="Grid Snake API", version="0.1.0", lifespan=lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
