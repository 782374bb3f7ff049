"""Session controller: pause/speed/game-over state machine around the engine."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from torus_snake.config import GameConfig, speed_label
from torus_snake.controls import Command, DirectionBuffer
from torus_snake.engine import Collided, TickEngine
from torus_snake.food import Food, FoodPlacer
from torus_snake.grid import Grid, Position
from torus_snake.persistence import (
    HighScoreGateway,
    InMemoryHighScoreStore,
    JsonHighScoreStore,
)
from torus_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

_START_DIRECTION = Direction.RIGHT


class SessionState(str, enum.Enum):
    """Lifecycle states of a session."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers."""

    snake: tuple[Position, ...]
    food: Food | None
    state: SessionState
    score: int
    high_score: int
    direction: Direction
    ticks: int
    tick_interval_ms: int
    grid_size: int

    @property
    def speed_label(self) -> str:
        return speed_label(self.tick_interval_ms)

    def to_dict(self) -> dict:
        """Serialize to a JSON-ready dictionary."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": self.food.to_dict() if self.food is not None else None,
            "state": self.state.value,
            "score": self.score,
            "high_score": self.high_score,
            "direction": self.direction.name.lower(),
            "ticks": self.ticks,
            "tick_interval_ms": self.tick_interval_ms,
            "speed_label": self.speed_label,
            "grid_size": self.grid_size,
        }


Listener = Callable[[Snapshot], None]


def _default_gateway(config: GameConfig) -> HighScoreGateway:
    if config.high_score_path:
        return JsonHighScoreStore(config.high_score_path)
    return InMemoryHighScoreStore()


class SessionController:
    """Owns one game session and drives it one tick at a time.

    The controller is not thread-safe; callers running it from an event
    loop must serialize :meth:`tick` and command handling (see
    :class:`torus_snake.scheduler.TickScheduler`).
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        gateway: HighScoreGateway | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.gateway = (
            gateway if gateway is not None else _default_gateway(self.config)
        )
        self.grid = Grid(self.config.grid_size)
        self.rng = (
            rng if rng is not None else np.random.default_rng(self.config.seed)
        )
        self.engine = TickEngine(self.grid, FoodPlacer(self.grid, rng=self.rng))
        self.high_score = max(0, self.gateway.read_high_score())
        self.tick_interval_ms = self.config.tick_interval_ms
        self.buffer = DirectionBuffer(_START_DIRECTION)
        self._listeners: list[Listener] = []
        self._reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        center = self.grid.size // 2
        # Long snakes trail past the left edge and wrap onto the far side.
        spawned = Snake.spawn(
            center, center, _START_DIRECTION, self.config.initial_length,
        )
        self.snake = Snake(self.grid.wrap(x, y) for x, y in spawned)
        self.food = self.engine.placer.spawn(self.grid.occupied(self.snake))
        self.buffer.reset(_START_DIRECTION)
        self.score = 0
        self.ticks = 0
        self.state = SessionState.RUNNING

    def restart(self) -> Snapshot:
        """Start a fresh session. The high score is kept."""
        self._reset()
        logger.info("Session restarted.")
        return self._publish()

    def toggle_pause(self) -> Snapshot:
        """Flip between running and paused; no effect once the game is over."""
        if self.state == SessionState.RUNNING:
            self.state = SessionState.PAUSED
        elif self.state == SessionState.PAUSED:
            self.state = SessionState.RUNNING
        return self._publish()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    @property
    def direction(self) -> Direction:
        """Direction applied on the most recent tick."""
        return self.buffer.committed

    @property
    def pending_direction(self) -> Direction:
        return self.buffer.pending

    def propose_direction(self, direction: Direction) -> bool:
        """Buffer a direction change for the next tick."""
        if self.state == SessionState.GAME_OVER:
            return False
        return self.buffer.propose(direction)

    def handle(self, command: Command | str) -> Snapshot:
        """Apply an input command. Unknown commands are ignored."""
        try:
            command = Command(command)
        except ValueError:
            logger.debug("Ignoring unknown command %r.", command)
            return self.snapshot()

        if command == Command.TOGGLE_PAUSE:
            return self.toggle_pause()
        if command == Command.RESTART:
            return self.restart()

        direction = command.direction
        assert direction is not None  # noqa: S101
        if self.propose_direction(direction):
            return self._publish()
        return self.snapshot()

    def set_tick_interval(self, tick_interval_ms: int) -> int:
        """Change the tick cadence, clamped to the configured range."""
        self.tick_interval_ms = self.config.clamp_interval(tick_interval_ms)
        self._publish()
        return self.tick_interval_ms

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def tick(self) -> Snapshot:
        """Advance the game by one step unless paused or over."""
        if self.state != SessionState.RUNNING:
            return self.snapshot()

        direction = self.buffer.commit()
        outcome = self.engine.advance(self.snake, direction, self.food)

        if isinstance(outcome, Collided):
            self.state = SessionState.GAME_OVER
            logger.info(
                "Snake collided at %s after %d ticks with score %d.",
                outcome.position, self.ticks, self.score,
            )
            return self._publish()

        self.snake = outcome.snake
        self.food = outcome.food
        self.ticks += 1
        if outcome.ate:
            self._award(self.config.food_reward)
            if self.food is None:
                self.state = SessionState.GAME_OVER
                logger.info(
                    "Snake filled the grid with score %d.", self.score,
                )
        return self._publish()

    def _award(self, points: int) -> None:
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score
            self.gateway.write_high_score(self.high_score)
            logger.debug("New high score: %d", self.high_score)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Register a callback receiving a snapshot after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        """Return the current read-only session view."""
        return Snapshot(
            snake=self.snake.body,
            food=self.food,
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            direction=self.buffer.committed,
            ticks=self.ticks,
            tick_interval_ms=self.tick_interval_ms,
            grid_size=self.grid.size,
        )

    def _publish(self) -> Snapshot:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap
