"""High-score storage gateways."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class HighScoreGateway(Protocol):
    """Key-value style store for the best score ever reached."""

    def read_high_score(self) -> int: ...

    def write_high_score(self, score: int) -> None: ...


class InMemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only."""

    def __init__(self, initial: int = 0) -> None:
        self._score = max(0, int(initial))
        self.writes = 0

    def read_high_score(self) -> int:
        return self._score

    def write_high_score(self, score: int) -> None:
        self._score = int(score)
        self.writes += 1


class JsonHighScoreStore:
    """Persists the high score to a small JSON document on disk.

    A missing, unreadable, or malformed file reads as 0.
    """

    KEY = "high_score"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read high score from %s.", self.path)
            return 0
        value = raw.get(self.KEY, 0) if isinstance(raw, dict) else 0
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning("Ignoring invalid high score %r in %s.", value, self.path)
            return 0
        return value

    def write_high_score(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({self.KEY: int(score)}))
        logger.info("High score %d saved to %s", score, self.path)

    def clear(self) -> bool:
        """Delete the stored score. Returns True if a file was removed."""
        if self.path.exists():
            self.path.unlink()
            return True
        return False
