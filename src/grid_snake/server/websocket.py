"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from grid_snake.engine import GameModel
from grid_snake.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(model: GameModel) -> str:
    return json.dumps(model.to_dict(), separators=(",", ":"))


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Send input events, receive the snapshot after every tick."""
    manager = _get_manager(websocket)
    entry = manager.get_session(session_id)
    if entry is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session = entry.session

    async def forward(model: GameModel) -> None:
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.send_text(_encode(model))

    # Send the current snapshot so the client can draw immediately.
    await websocket.send_text(_encode(session.latest))
    session.subscribe(forward)
    logger.info("Client connected to session %s.", session_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            event = msg.get("event")
            if not isinstance(event, str):
                continue
            try:
                await session.submit(event)
            except ValueError:
                logger.debug("Ignored unknown event %r.", event)
    except WebSocketDisconnect:
        logger.info("Client disconnected from session %s.", session_id)
    finally:
        session.unsubscribe(forward)
