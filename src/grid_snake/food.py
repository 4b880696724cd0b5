"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import Position

if TYPE_CHECKING:
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Owns the single food cell on the grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Position | None = None

    def spawn(self, occupied: Iterable[Position]) -> Position:
        """Move the food to a random cell outside *occupied*."""
        self.position = self.grid.random_cell_excluding(occupied, self.rng)
        logger.debug("Food placed at %s.", self.position)
        return self.position

    def is_at(self, pos: Position) -> bool:
        return self.position == pos

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": self.position.to_list() if self.position else None,
        }
