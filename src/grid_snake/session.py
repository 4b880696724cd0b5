"""Serialized owner of one engine: async tick loop and snapshot publishing."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from grid_snake.config import EngineConfig
from grid_snake.engine import GameEngine, GameModel
from grid_snake.events import Event

logger = logging.getLogger(__name__)

Subscriber = Callable[[GameModel], Awaitable[None] | None]


class GameSession:
    """Single-writer wrapper around a :class:`GameEngine`.

    Input events and ticks both go through one lock, so a tick never sees a
    half-applied event. After every tick, including ticks that do nothing
    because the game is stopped, the snapshot is pushed to all subscribers.

    The session owns its timer task. Call :meth:`close` when the game ends.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        if engine is None:
            engine = GameEngine.create(config)
        self.engine = engine
        self.tick_interval = engine.config.tick_interval
        self.lock = asyncio.Lock()
        self._subscribers: list[Subscriber] = []
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        """Whether the tick loop is active."""
        return self._task is not None and not self._task.done()

    @property
    def latest(self) -> GameModel:
        return self.engine.snapshot()

    def subscribe(self, callback: Subscriber) -> None:
        """Receive every published snapshot."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    async def submit(self, event: Event | str) -> None:
        """Apply an input event. Raises ``ValueError`` for unknown events."""
        if not isinstance(event, Event):
            event = Event.parse(event)
        async with self.lock:
            self.engine.handle_event(event)

    async def step(self) -> GameModel:
        """Run one tick and publish the result."""
        async with self.lock:
            model = self.engine.tick()
        await self._publish(model)
        return model

    def start(self) -> None:
        """Launch the fixed-interval tick loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._tick_loop())
        logger.info(
            "Tick loop started (interval=%dms).",
            self.engine.config.tick_interval_ms,
        )

    async def close(self) -> None:
        """Cancel the tick loop and drop all subscribers."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self._subscribers.clear()

    async def _tick_loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.tick_interval)
                await self.step()
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error; stopping session.")

    async def _publish(self, model: GameModel) -> None:
        """Send a snapshot to all subscribers, dropping broken ones."""
        # Iterate over a copy so callbacks may unsubscribe themselves.
        for callback in list(self._subscribers):
            try:
                result = callback(model)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.warning("Dropping subscriber %r after failure.", callback)
                self.unsubscribe(callback)
