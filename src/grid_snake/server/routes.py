"""REST API route handlers for session lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.config import EngineConfig
from grid_snake.server.models import (
    CreateSessionRequest,
    EventRequest,
    SessionSummary,
)
from grid_snake.server.session_manager import SessionEntry, SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_entry(request: Request, session_id: str) -> SessionEntry:
    entry = _get_manager(request).get_session(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return entry


def _summary(entry: SessionEntry) -> SessionSummary:
    engine = entry.session.engine
    return SessionSummary(
        session_id=entry.session_id,
        grid_size=engine.config.grid_size,
        tick_interval_ms=engine.config.tick_interval_ms,
        ticking=entry.session.running,
        run_state=engine.run_state.value,
    )


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new game session."""
    manager = _get_manager(request)
    try:
        config = EngineConfig(
            grid_size=body.grid_size,
            tick_interval_ms=body.tick_interval_ms,
            initial_direction=body.initial_direction,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        entry = manager.create_session(config, autostart=body.autostart)
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _summary(entry)


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List open sessions."""
    return [_summary(e) for e in _get_manager(request).list_sessions()]


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the latest game state."""
    entry = _get_entry(request, session_id)
    result: dict = _summary(entry).model_dump()
    result["state"] = entry.session.engine.get_state()
    return result


@router.post("/{session_id}/events", status_code=200)
async def post_event(
    session_id: str, body: EventRequest, request: Request,
) -> dict:
    """Forward one input event to the session."""
    entry = _get_entry(request, session_id)
    try:
        await entry.session.submit(body.event)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {
        "session_id": session_id,
        "direction": entry.session.engine.direction.name.lower(),
        "run_state": entry.session.engine.run_state.value,
    }


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, request: Request) -> Response:
    """Close a session and stop its ticks."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
