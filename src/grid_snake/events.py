"""Input events and run state."""

from __future__ import annotations

import enum

from grid_snake.snake import Direction


class Event(str, enum.Enum):
    """The closed set of inputs the engine understands."""

    START = "start"
    STOP = "stop"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, raw: str) -> Event:
        """Map a wire name such as ``"Up"`` to an event."""
        if not isinstance(raw, str):
            raise ValueError(f"Event name must be a string, got {raw!r}.")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown event: {raw!r}.") from None

    @property
    def direction(self) -> Direction | None:
        """Return the direction for a directional event, else ``None``."""
        return _EVENT_DIRECTIONS.get(self)


_EVENT_DIRECTIONS: dict[Event, Direction] = {
    Event.UP: Direction.UP,
    Event.DOWN: Direction.DOWN,
    Event.LEFT: Direction.LEFT,
    Event.RIGHT: Direction.RIGHT,
}


class RunState(str, enum.Enum):
    """Whether ticks mutate the game."""

    RUNNING = "running"
    STOPPED = "stopped"
