"""Application entry point for FlagQuiz.

Usage:
    python app_main.py                      # desktop game
    python app_main.py --web --port 8000    # play in a browser instead
    python app_main.py --mode high-score --save-high-score
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from flag_quiz.constants.game_constants import DEFAULT_HIGH_SCORE_PATH
from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.core.country_importer import (
    CountryImportError,
    ImportedDataset,
    load_countries_from_file,
    load_default_countries,
)
from flag_quiz.core.game_controller import GameController
from flag_quiz.core.models import PresentationMode
from flag_quiz.core.services.high_score_store import HighScoreStore
from flag_quiz.core.settings import GameSettings
from flag_quiz.utils.logging_config import configure_logging


def parse_args(argv: list[str] | None = None) -> GameSettings:
    parser = argparse.ArgumentParser(description="Guess the country from its flag.")
    parser.add_argument("--web", action="store_true", help="Serve the game to a browser instead of opening a window")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Host for --web")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port for --web")
    parser.add_argument("--dataset", type=Path, help="Country list in 'CODE | Name | Continent' format")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PresentationMode],
        default=PresentationMode.SCORED_PERCENTAGE.value,
        help="End screen: percentage with breakdown, or raw score with best score",
    )
    parser.add_argument("--seed", type=int, help="Fixed shuffle seed")
    parser.add_argument("--no-sound", action="store_true", help="Disable sound effects")
    parser.add_argument("--save-high-score", action="store_true", help="Write new best scores to disk")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=Path(DEFAULT_HIGH_SCORE_PATH),
        help="Where the best score is stored",
    )
    args = parser.parse_args(argv)

    return GameSettings(
        presentation_mode=PresentationMode(args.mode),
        shuffle_seed=args.seed,
        sound_enabled=not args.no_sound,
        persist_high_score=args.save_high_score,
        dataset_path=args.dataset,
        high_score_path=args.high_score_file,
        web_mode=args.web,
        host=args.host,
        port=args.port,
    )


def load_dataset(settings: GameSettings) -> ImportedDataset:
    if settings.dataset_path is None:
        return load_default_countries()
    return load_countries_from_file(settings.dataset_path)


def build_controller(settings: GameSettings, dataset: ImportedDataset) -> GameController:
    return GameController(
        dataset.countries,
        presentation_mode=settings.presentation_mode,
        high_score_store=HighScoreStore(
            settings.high_score_path,
            write_enabled=settings.persist_high_score,
        ),
        shuffle_seed=settings.shuffle_seed,
    )


def run_web(settings: GameSettings) -> int:
    from flag_quiz.server.api_server import start_api_server

    logger = configure_logging()
    try:
        dataset = load_dataset(settings)
        controller = build_controller(settings, dataset)
    except (OSError, CountryImportError, ValueError) as exc:
        logger.error("Could not load the country list: %s", exc)
        return 1
    start_api_server(controller, host=settings.host, port=settings.port)
    return 0


def run_desktop(settings: GameSettings) -> int:
    from PySide6.QtWidgets import QApplication

    from flag_quiz.ui import GameMainWindow, SoundManager, show_error

    logger = configure_logging()
    logger.info("Starting FlagQuiz…")

    app = QApplication(sys.argv)
    try:
        dataset = load_dataset(settings)
        controller = build_controller(settings, dataset)
    except (OSError, CountryImportError, ValueError) as exc:
        logger.error("Could not load the country list: %s", exc)
        show_error(None, "Dataset error", str(exc))
        return 1

    sound_manager = SoundManager(enabled=settings.sound_enabled)
    controller.set_cue_player(sound_manager)

    window = GameMainWindow(controller=controller, settings=settings, sound_manager=sound_manager)
    window.show()
    return app.exec()


def main(argv: list[str] | None = None) -> None:
    """Parse options and launch either the desktop window or the web server."""
    settings = parse_args(argv)
    if settings.web_mode:
        sys.exit(run_web(settings))
    sys.exit(run_desktop(settings))


if __name__ == "__main__":
    main()
