"""Engine configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.events import RunState
from grid_snake.grid import GRID_SIZE, Position
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 400


@dataclass(frozen=True)
class EngineConfig:
    """Fixed-at-construction settings for one game session.

    Supports JSON serialization for reproducibility.
    """

    grid_size: int = GRID_SIZE
    tick_interval_ms: int = TICK_INTERVAL_MS

    # Starting layout. The body is ordered tail first.
    initial_head: tuple[int, int] = (2, 0)
    initial_body: tuple[tuple[int, int], ...] = ((0, 0), (1, 0))
    initial_direction: str = "right"
    initial_run_state: str = "running"

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if len(self.initial_body) < 2:
            raise ValueError("initial_body needs at least 2 segments.")
        Direction.from_name(self.initial_direction)
        try:
            RunState(self.initial_run_state)
        except ValueError:
            raise ValueError(
                f"Unknown run state: {self.initial_run_state!r}."
            ) from None

        cells = [self.head_position, *self.body_positions]
        if len(set(cells)) != len(cells):
            raise ValueError("Initial snake segments must not overlap.")
        for x, y in cells:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"Initial segment ({x}, {y}) is off the grid.")

        # Tail to head, each segment must touch the next one.
        chain = [*self.body_positions, self.head_position]
        for a, b in zip(chain, chain[1:]):
            if abs(a.x - b.x) + abs(a.y - b.y) != 1:
                raise ValueError(
                    f"Initial segments {tuple(a)} and {tuple(b)} are not adjacent."
                )
        if self.direction.apply(self.head_position) == self.body_positions[-1]:
            raise ValueError(
                f"initial_direction {self.initial_direction!r} points into the body."
            )

    @property
    def head_position(self) -> Position:
        return Position(*self.initial_head)

    @property
    def body_positions(self) -> tuple[Position, ...]:
        return tuple(Position(*seg) for seg in self.initial_body)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    @property
    def run_state(self) -> RunState:
        return RunState(self.initial_run_state)

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> EngineConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "initial_head" in raw:
            raw["initial_head"] = tuple(raw["initial_head"])
        if "initial_body" in raw:
            raw["initial_body"] = tuple(tuple(seg) for seg in raw["initial_body"])
        return cls(**raw)
