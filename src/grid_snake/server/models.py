"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    grid_size: int = Field(default=20, ge=4, le=100)
    tick_interval_ms: int = Field(default=400, ge=50, le=2000)
    initial_direction: str = Field(default="right", max_length=16)
    seed: int | None = None
    autostart: bool = True


class EventRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/events."""

    event: str = Field(min_length=1, max_length=16)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    grid_size: int
    tick_interval_ms: int
    ticking: bool
    run_state: str
