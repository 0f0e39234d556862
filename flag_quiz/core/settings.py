"""Runtime options shared by the command line, the settings dialog and the controller."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from flag_quiz.constants.game_constants import DEFAULT_HIGH_SCORE_PATH
from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.core.models import PresentationMode


@dataclass(slots=True)
class GameSettings:
    presentation_mode: PresentationMode = PresentationMode.SCORED_PERCENTAGE
    shuffle_seed: int | None = None
    sound_enabled: bool = True
    # The high score is only read by default; writing back is opt-in.
    persist_high_score: bool = False
    dataset_path: Path | None = None
    high_score_path: Path = Path(DEFAULT_HIGH_SCORE_PATH)
    web_mode: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
