"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from grid_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None

    def apply(self, pos: Position) -> Position:
        """Return *pos* moved one cell in this direction."""
        dx, dy = self.value
        return Position(pos.x + dx, pos.y + dy)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake made of a head and a body.

    ``body`` is ordered oldest first: ``body[0]`` is the tail and
    ``body[-1]`` is the segment right behind the head.
    """

    def __init__(self, head: Position, body: Iterable[Position]) -> None:
        self.head = Position(*head)
        self.body: list[Position] = [Position(*seg) for seg in body]

    @classmethod
    def initial(cls, head: Position, body: Iterable[Position]) -> Snake:
        """Build a fresh snake in the given starting layout."""
        return cls(head, body)

    @property
    def length(self) -> int:
        return 1 + len(self.body)

    def occupied(self) -> set[Position]:
        """Return the occupancy set (head and every body segment)."""
        return {self.head, *self.body}

    def step(self, direction: Direction, grow: bool = False) -> Position:
        """Move one cell in *direction* and return the new head.

        The old head becomes the newest body segment. Unless growing, the
        oldest segment is dropped so the length stays constant.
        """
        old_head = self.head
        new_head = direction.apply(old_head)
        body = self.body if grow else self.body[1:]
        self.body = [*body, old_head]
        self.head = new_head
        return new_head

    def hits_self(self) -> bool:
        """Check whether the head overlaps a body segment.

        The newest segment is skipped; it was the head one step ago.
        """
        return self.head in self.body[:-1]

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": self.head.to_list(),
            "body": [seg.to_list() for seg in self.body],
        }
