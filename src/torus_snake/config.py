"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def speed_label(tick_interval_ms: int) -> str:
    """Human-readable name for a tick interval."""
    if tick_interval_ms <= 80:
        return "Fast"
    if tick_interval_ms >= 160:
        return "Chill"
    return "Normal"


@dataclass(frozen=True)
class GameConfig:
    """Tunable settings for a game session.

    Supports JSON serialization so a setup can be shared or reloaded.
    """

    # Grid
    grid_size: int = 20
    initial_length: int = 3

    # Cadence
    tick_interval_ms: int = 120
    min_tick_interval_ms: int = 60
    max_tick_interval_ms: int = 220
    tick_interval_step_ms: int = 10

    # Scoring
    food_reward: int = 10

    # Persistence / randomness
    high_score_path: str | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if not 1 <= self.initial_length < self.grid_size:
            raise ValueError("initial_length must be between 1 and grid_size - 1.")
        if self.min_tick_interval_ms < 1:
            raise ValueError("min_tick_interval_ms must be positive.")
        if self.min_tick_interval_ms > self.max_tick_interval_ms:
            raise ValueError(
                "min_tick_interval_ms must not exceed max_tick_interval_ms.",
            )
        if not (
            self.min_tick_interval_ms
            <= self.tick_interval_ms
            <= self.max_tick_interval_ms
        ):
            raise ValueError("tick_interval_ms is outside the allowed range.")
        if self.tick_interval_step_ms < 1:
            raise ValueError("tick_interval_step_ms must be positive.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be >= 0.")

    def clamp_interval(self, tick_interval_ms: int) -> int:
        """Bound an interval to ``[min_tick_interval_ms, max_tick_interval_ms]``."""
        return max(
            self.min_tick_interval_ms,
            min(self.max_tick_interval_ms, int(tick_interval_ms)),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
