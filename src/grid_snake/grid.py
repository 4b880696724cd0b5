"""Grid geometry for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Position(NamedTuple):
    """An (x, y) grid cell. ``x`` grows rightwards, ``y`` grows downwards."""

    x: int
    y: int

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class GridFullError(RuntimeError):
    """Raised when no free cell is left for food placement.

    The grid is always larger than any reachable snake, so this signals a
    broken invariant rather than a game condition.
    """


class Grid:
    """Square N×N playable area with coordinates in ``[0, N)``."""

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def random_cell_excluding(
        self,
        excluded: Iterable[Position],
        rng: np.random.Generator,
    ) -> Position:
        """Return a uniformly random cell not in *excluded*.

        Uses rejection sampling: draw any cell, redraw while it is excluded.
        """
        blocked = {Position(*p) for p in excluded}
        if sum(1 for p in blocked if self.in_bounds(p)) >= self.cell_count:
            raise GridFullError(
                f"No free cell left on a {self.size}x{self.size} grid."
            )
        while True:
            x, y = rng.integers(0, self.size, size=2)
            candidate = Position(int(x), int(y))
            if candidate not in blocked:
                return candidate

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"size": self.size}
