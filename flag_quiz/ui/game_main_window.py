"""Qt main window switching between the quiz and the game-over page."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from flag_quiz.constants.ui_constants import (
    TOOLBAR_ABOUT,
    TOOLBAR_HELP,
    TOOLBAR_RESTART,
    TOOLBAR_SETTINGS,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from flag_quiz.core.game_controller import GameController
from flag_quiz.core.settings import GameSettings
from flag_quiz.styling.styles import Styles
from flag_quiz.ui.components.game_over_panel import GameOverPanel
from flag_quiz.ui.components.quiz_panel import QuizPanel
from flag_quiz.ui.dialog_helpers import confirm_restart, show_info
from flag_quiz.ui.settings_dialog import SettingsDialog
from flag_quiz.ui.sound_manager import SoundManager


class GameMode(Enum):
    """Which page the window currently shows."""

    PLAYING = auto()
    GAME_OVER = auto()


class GameMainWindow(QMainWindow):
    """Main Qt window driving one GameController."""

    def __init__(
        self,
        controller: GameController,
        settings: GameSettings,
        sound_manager: SoundManager,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.controller = controller
        self.settings = settings
        self.sound_manager = sound_manager
        self._mode = GameMode.PLAYING

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._start_game()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.page_stack = QStackedWidget(self)
        self.quiz_panel = QuizPanel(
            self.controller,
            on_session_finished=self._show_game_over,
            parent=self
        )
        self.game_over_panel = GameOverPanel(on_play_again=self._start_game, parent=self)
        self.page_stack.addWidget(self.quiz_panel)
        self.page_stack.addWidget(self.game_over_panel)
        root_layout.addWidget(self.page_stack, stretch=1)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.restart_button = QPushButton(TOOLBAR_RESTART, self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.settings_button = QPushButton(TOOLBAR_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(TOOLBAR_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(TOOLBAR_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: GameMode) -> None:
        self._mode = mode
        index_map = {
            GameMode.PLAYING: 0,
            GameMode.GAME_OVER: 1,
        }
        self.page_stack.setCurrentIndex(index_map[mode])

    def _start_game(self) -> None:
        view = self.controller.start()
        if view is None:
            # Empty dataset: the session ended immediately
            self._show_game_over()
            return
        self._set_mode(GameMode.PLAYING)
        self.quiz_panel.show_question(view)

    def _show_game_over(self) -> None:
        summary = self.controller.end()
        self.game_over_panel.show_summary(summary)
        self._set_mode(GameMode.GAME_OVER)

    def _handle_restart(self) -> None:
        if self.controller.is_in_progress() and not confirm_restart(self):
            return
        self._start_game()

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self.settings.presentation_mode,
            self.settings.sound_enabled,
            self.settings.persist_high_score,
            self.settings.shuffle_seed,
        )
        if dialog.exec():
            self.settings.presentation_mode = dialog.get_presentation_mode()
            self.settings.sound_enabled = dialog.get_sound_enabled()
            self.settings.persist_high_score = dialog.get_persist_high_score()
            new_seed = dialog.get_shuffle_seed()
            seed_changed = new_seed != self.settings.shuffle_seed
            self.settings.shuffle_seed = new_seed

            self.controller.set_presentation_mode(self.settings.presentation_mode)
            self.controller.set_high_score_persistence(self.settings.persist_high_score)
            self.sound_manager.set_enabled(self.settings.sound_enabled)
            if seed_changed:
                # Reseeding only makes sense from the start of a game
                self.controller.set_shuffle_seed(new_seed)
                self._start_game()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
