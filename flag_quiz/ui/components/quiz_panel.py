"""Component showing the current flag and its answer options."""

from __future__ import annotations

from PySide6.QtCore import QSize, Qt, QTimer
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.ui_constants import (
    FEEDBACK_CORRECT,
    FEEDBACK_WRONG_TEMPLATE,
    FLAG_DISPLAY_HEIGHT,
    FLAG_DISPLAY_WIDTH,
    FLAG_LOADING_TEXT,
    FLAG_UNAVAILABLE_TEXT,
    FLASH_DURATION_MS,
    NEXT_BUTTON_TEXT,
    OPTION_GRID_COLUMNS,
    PROGRESS_TEMPLATE,
    SCORE_TEMPLATE,
)
from flag_quiz.core.game_controller import GameController
from flag_quiz.core.models import AnswerResult, QuestionView
from flag_quiz.styling.styles import (
    OPTION_STATE_CORRECT,
    OPTION_STATE_DEFAULT,
    OPTION_STATE_WRONG,
    Styles,
)
from flag_quiz.ui.flag_loader import FlagLoader


class QuizPanel(QWidget):
    """UI component for answering one flag at a time."""

    def __init__(
        self,
        controller: GameController,
        on_session_finished: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_session_finished = on_session_finished

        self._option_buttons: dict[str, QPushButton] = {}
        self._current_flag_url: str | None = None

        self.flag_loader = FlagLoader(QSize(FLAG_DISPLAY_WIDTH, FLAG_DISPLAY_HEIGHT), self)
        self.flag_loader.flag_loaded.connect(self._handle_flag_loaded)
        self.flag_loader.flag_failed.connect(self._handle_flag_failed)

        self._build_ui()

    def _build_ui(self) -> None:
        outer_layout = QVBoxLayout()
        self.setLayout(outer_layout)

        self.flash_frame = QFrame(self)
        self.flash_frame.setObjectName("flashFrame")
        self.flash_frame.setStyleSheet(Styles.get_flash_style(None))
        outer_layout.addWidget(self.flash_frame)

        layout = QVBoxLayout()
        self.flash_frame.setLayout(layout)

        # Score and progress
        header_row = QHBoxLayout()
        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0), self)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.score_label)
        header_row.addStretch()
        self.progress_label = QLabel(PROGRESS_TEMPLATE.format(asked=0, total=0), self)
        self.progress_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.progress_label)
        layout.addLayout(header_row)

        # Flag and hint
        self.flag_label = QLabel(FLAG_LOADING_TEXT, self)
        self.flag_label.setAlignment(Qt.AlignCenter)
        self.flag_label.setFixedSize(FLAG_DISPLAY_WIDTH, FLAG_DISPLAY_HEIGHT)
        layout.addWidget(self.flag_label, alignment=Qt.AlignHCenter)

        self.continent_label = QLabel("", self)
        self.continent_label.setAlignment(Qt.AlignCenter)
        self.continent_label.setStyleSheet(Styles.get_hint_label_style())
        layout.addWidget(self.continent_label)

        # Options
        self.options_grid = QGridLayout()
        self.options_grid.setSpacing(10)
        layout.addLayout(self.options_grid)

        # Feedback and next
        feedback_row = QHBoxLayout()
        self.feedback_label = QLabel("", self)
        self.feedback_label.setStyleSheet(Styles.get_large_label_style())
        feedback_row.addWidget(self.feedback_label)
        feedback_row.addStretch()
        self.next_button = QPushButton(NEXT_BUTTON_TEXT, self)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(self._handle_next)
        feedback_row.addWidget(self.next_button)
        layout.addLayout(feedback_row)

        layout.addStretch()
        self._set_feedback_visible(False)

    def show_question(self, view: QuestionView) -> None:
        self._set_feedback_visible(False)
        self._update_counters(view.score, view.asked_count, view.total_count)
        self.continent_label.setText(view.continent_hint)

        # Hide the previous flag until the new image arrives
        self.flag_label.clear()
        self.flag_label.setText(FLAG_LOADING_TEXT)
        self._current_flag_url = view.flag_url
        self.flag_loader.load(view.flag_url)

        self._clear_option_buttons()
        for index, option in enumerate(view.options):
            button = QPushButton(option.label, self)
            button.setStyleSheet(Styles.get_option_button_style(OPTION_STATE_DEFAULT))
            button.clicked.connect(lambda _=False, code=option.code: self._handle_option_clicked(code))
            row, column = divmod(index, OPTION_GRID_COLUMNS)
            self.options_grid.addWidget(button, row, column)
            self._option_buttons[option.code] = button

    def _handle_option_clicked(self, code: str) -> None:
        result = self.controller.answer_with_code(code)
        if result is None:
            return
        self._show_result(result)

    def _show_result(self, result: AnswerResult) -> None:
        selected = self._option_buttons.get(result.selected_code)
        if result.is_correct:
            if selected is not None:
                selected.setStyleSheet(Styles.get_option_button_style(OPTION_STATE_CORRECT))
            self.feedback_label.setText(FEEDBACK_CORRECT)
        else:
            if selected is not None:
                selected.setStyleSheet(Styles.get_option_button_style(OPTION_STATE_WRONG))
            correct = self._option_buttons.get(result.correct_code)
            if correct is not None:
                correct.setStyleSheet(Styles.get_option_button_style(OPTION_STATE_CORRECT))
            self.feedback_label.setText(FEEDBACK_WRONG_TEMPLATE.format(name=result.correct_name))

        for button in self._option_buttons.values():
            button.setEnabled(False)

        asked, total = self.controller.get_progress()
        self._update_counters(result.score, asked, total)
        self._flash(result.is_correct)
        self._set_feedback_visible(True)
        self.next_button.setFocus()

    def _handle_next(self) -> None:
        view = self.controller.generate_question()
        if view is None:
            self.on_session_finished()
            return
        self.show_question(view)

    def _handle_flag_loaded(self, url: str, pixmap: QPixmap) -> None:
        if url != self._current_flag_url:
            return
        self.flag_label.setPixmap(pixmap)

    def _handle_flag_failed(self, url: str) -> None:
        if url == self._current_flag_url:
            self.flag_label.setText(FLAG_UNAVAILABLE_TEXT)

    def _flash(self, is_correct: bool) -> None:
        self.flash_frame.setStyleSheet(Styles.get_flash_style(is_correct))
        QTimer.singleShot(
            FLASH_DURATION_MS,
            lambda: self.flash_frame.setStyleSheet(Styles.get_flash_style(None)),
        )

    def _update_counters(self, score: int, asked: int, total: int) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=score))
        self.progress_label.setText(PROGRESS_TEMPLATE.format(asked=asked, total=total))

    def _set_feedback_visible(self, visible: bool) -> None:
        self.feedback_label.setVisible(visible)
        self.next_button.setVisible(visible)
        if not visible:
            self.feedback_label.setText("")

    def _clear_option_buttons(self) -> None:
        while self.options_grid.count():
            item = self.options_grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._option_buttons = {}
