"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.config import EngineConfig
from grid_snake.events import Event, RunState
from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid, Position
from grid_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameModel:
    """Immutable snapshot handed to renderers and observers."""

    head: Position
    body: tuple[Position, ...]
    food: Position

    def to_dict(self) -> dict:
        return {
            "head": self.head.to_list(),
            "body": [seg.to_list() for seg in self.body],
            "food": self.food.to_list(),
        }


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the grid, snake, and food spawner. Input arrives through
    :meth:`handle_event`, which only touches control state (run state and
    the current direction). Each call to :meth:`tick` advances the snake by
    one cell and returns a fresh :class:`GameModel`.

    A collision never ends the game: the snake and direction go back to
    their initial values. The food stays where it is unless the restored
    snake would cover it.

    The engine does no locking of its own. Callers sharing one engine
    between an input source and a timer must serialize access, see
    :class:`grid_snake.session.GameSession`.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self.grid = Grid(size=self.config.grid_size)
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )

        self._snake = Snake.initial(
            self.config.head_position, self.config.body_positions,
        )
        self._direction = self.config.direction
        self._run_state = self.config.run_state

        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)
        self.food_spawner.spawn(self._snake.occupied())

        self._ticks = 0
        self._resets = 0
        self._model = self._build_model()

    @classmethod
    def create(cls, config: EngineConfig | None = None) -> GameEngine:
        """Return a new engine in the initial layout."""
        return cls(config)

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def food(self) -> Position:
        """Current food cell."""
        assert self.food_spawner.position is not None  # noqa: S101
        return self.food_spawner.position

    @property
    def ticks(self) -> int:
        """Number of ticks that moved the snake."""
        return self._ticks

    @property
    def resets(self) -> int:
        """Number of collisions since creation."""
        return self._resets

    def handle_event(self, event: Event | str) -> None:
        """Apply one input event to the control state.

        Direction changes take effect on the very next :meth:`tick`. Only the
        latest accepted direction before a tick counts. Reversals into the
        opposite direction are ignored.
        """
        if not isinstance(event, Event):
            event = Event.parse(event)

        if event is Event.START:
            self._run_state = RunState.RUNNING
        elif event is Event.STOP:
            self._run_state = RunState.STOPPED
        else:
            direction = event.direction
            if direction is self._direction.opposite:
                logger.debug("Ignored reversal from %s.", self._direction.name)
                return
            self._direction = direction

    def tick(self) -> GameModel:
        """Advance the game by one tick and return the snapshot.

        Does nothing while stopped.
        """
        if self._run_state is RunState.STOPPED:
            return self._model

        new_head = self._direction.apply(self._snake.head)
        ate = self.food_spawner.is_at(new_head)
        self._snake.step(self._direction, grow=ate)

        if ate:
            self.food_spawner.spawn(self._snake.occupied())

        # Collisions are judged on the post-move state.
        hit_wall = not self.grid.in_bounds(self._snake.head)
        if hit_wall or self._snake.hits_self():
            self._reset(reason="wall" if hit_wall else "self")

        self._ticks += 1
        self._model = self._build_model()
        return self._model

    def snapshot(self) -> GameModel:
        """Return the latest model without changing anything."""
        return self._model

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        state = self._model.to_dict()
        state.update(
            direction=self._direction.name.lower(),
            run_state=self._run_state.value,
            tick=self._ticks,
            grid=self.grid.to_dict(),
        )
        return state

    def _reset(self, reason: str) -> None:
        """Put the snake and direction back to the starting layout."""
        self._resets += 1
        logger.info(
            "Snake hit %s at tick %d with length %d; resetting.",
            reason, self._ticks + 1, self._snake.length,
        )
        self._snake = Snake.initial(
            self.config.head_position, self.config.body_positions,
        )
        self._direction = self.config.direction
        # Food stays put unless the fresh snake now covers it.
        if self.food_spawner.position in self._snake.occupied():
            self.food_spawner.spawn(self._snake.occupied())

    def _build_model(self) -> GameModel:
        return GameModel(
            head=self._snake.head,
            body=tuple(self._snake.body),
            food=self.food,
        )
