"""Pytest fixtures for flag quiz tests.

Common fixtures: a small dataset with uneven continents, a recording cue
player, and controllers built on top of them.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from flag_quiz.core.game_controller import GameController
from flag_quiz.core.models import Country, PresentationMode
from flag_quiz.core.services.high_score_store import HighScoreStore


class RecordingCuePlayer:
    """Collects cue names instead of playing them."""

    def __init__(self) -> None:
        self.cues: list[str] = []

    def play_win(self) -> None:
        self.cues.append("win")

    def play_lose(self) -> None:
        self.cues.append("lose")

    def play_tone(self, frequency: float, waveform: str, duration: float) -> None:
        self.cues.append(f"tone:{waveform}:{frequency}")


SAMPLE_COUNTRIES = [
    # Europe: 8 countries, more than enough distractors
    Country("FR", "France", "Europe"),
    Country("DE", "Germany", "Europe"),
    Country("IT", "Italy", "Europe"),
    Country("ES", "Spain", "Europe"),
    Country("PT", "Portugal", "Europe"),
    Country("NL", "Netherlands", "Europe"),
    Country("BE", "Belgium", "Europe"),
    Country("AT", "Austria", "Europe"),
    # Oceania: 3 countries, each question gets exactly 3 options
    Country("AU", "Australia", "Oceania"),
    Country("NZ", "New Zealand", "Oceania"),
    Country("FJ", "Fiji", "Oceania"),
    # Antarctica-like single member continent
    Country("AQ", "Antarctica", "Antarctica"),
]


@pytest.fixture
def countries() -> list[Country]:
    return list(SAMPLE_COUNTRIES)


@pytest.fixture
def cue_player() -> RecordingCuePlayer:
    return RecordingCuePlayer()


@pytest.fixture
def high_score_path(tmp_path: Path) -> Path:
    return tmp_path / "scores" / "high_score.json"


@pytest.fixture
def controller(countries: list[Country], cue_player: RecordingCuePlayer) -> GameController:
    return GameController(countries, cue_player=cue_player, shuffle_seed=1234)


@pytest.fixture
def high_score_controller(
    countries: list[Country],
    cue_player: RecordingCuePlayer,
    high_score_path: Path,
) -> GameController:
    return GameController(
        countries,
        presentation_mode=PresentationMode.HIGH_SCORE,
        high_score_store=HighScoreStore(high_score_path, write_enabled=True),
        cue_player=cue_player,
        shuffle_seed=99,
    )


def correct_code_for(controller: GameController) -> str:
    """Find the right answer for the current question via its flag URL."""
    view = controller.current_question_view()
    assert view is not None
    flag_code = view.flag_url.rsplit("/", 1)[-1].removesuffix(".png").upper()
    return flag_code


def wrong_code_for(controller: GameController) -> str | None:
    view = controller.current_question_view()
    assert view is not None
    correct = correct_code_for(controller)
    return next((o.code for o in view.options if o.code != correct), None)
