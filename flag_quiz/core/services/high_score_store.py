"""Service persisting the best score between runs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from flag_quiz.constants.game_constants import DEFAULT_HIGH_SCORE_PATH, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and (optionally) writes a single integer in a small JSON file."""

    def __init__(self, path: Path | None = None, *, write_enabled: bool = False) -> None:
        self._path = (path or Path(DEFAULT_HIGH_SCORE_PATH)).expanduser()
        self._write_enabled = write_enabled

    @property
    def path(self) -> Path:
        return self._path

    def is_write_enabled(self) -> bool:
        return self._write_enabled

    def set_write_enabled(self, enabled: bool) -> None:
        self._write_enabled = enabled

    def load(self) -> int:
        """Return the stored score, or 0 when absent or unparsable."""
        if not self._path.exists():
            return 0
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self._path, exc)
            return 0

        value = payload.get(HIGH_SCORE_KEY) if isinstance(payload, dict) else None
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid high score value %r in %s", value, self._path)
            return 0
        return value

    def save_if_higher(self, score: int) -> bool:
        """Persist score when writing is enabled and it beats the stored value."""
        if not self._write_enabled:
            return False
        if score <= self.load():
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps({HIGH_SCORE_KEY: score}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self._path, exc)
            return False
        logger.info("New high score %d saved to %s", score, self._path)
        return True
