"""In-memory registry of independent game sessions."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from grid_snake.config import EngineConfig
from grid_snake.session import GameSession

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class SessionEntry:
    """A registered session and its bookkeeping."""

    session_id: str
    session: GameSession
    created_at: float = field(default_factory=time.monotonic)


class SessionManager:
    """Central registry managing all game sessions.

    Every session has its own engine and tick loop; sessions never share
    state with each other.
    """

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: dict[str, SessionEntry] = {}
        self._max_sessions = max_sessions

    def create_session(
        self,
        config: EngineConfig | None = None,
        autostart: bool = True,
    ) -> SessionEntry:
        """Create a session and, unless told otherwise, start its ticks."""
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Session limit reached. Try again later.")

        session_id = uuid.uuid4().hex[:12]
        entry = SessionEntry(
            session_id=session_id,
            session=GameSession(config=config),
        )
        self._sessions[session_id] = entry
        if autostart:
            entry.session.start()
        logger.info("Session %s created.", session_id)
        return entry

    def get_session(self, session_id: str) -> SessionEntry | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionEntry]:
        return list(self._sessions.values())

    async def close_session(self, session_id: str) -> None:
        """Stop a session's tick loop and forget it."""
        entry = self._sessions.pop(session_id, None)
        if entry is None:
            raise KeyError(f"Session {session_id} not found.")
        await entry.session.close()
        logger.info("Session %s closed.", session_id)

    async def cleanup(self) -> None:
        """Close every session."""
        for session_id in list(self._sessions):
            await self.close_session(session_id)
        logger.info("SessionManager cleanup complete.")
