"""Component for the end-of-session summary."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.ui_constants import (
    BEST_SCORE_TEMPLATE,
    BREAKDOWN_ROW_TEMPLATE,
    GAME_OVER_TITLE,
    NEW_BEST_TEMPLATE,
    PLAY_AGAIN_BUTTON_TEXT,
)
from flag_quiz.core.models import PresentationMode, SessionSummary
from flag_quiz.styling.styles import Styles


class GameOverPanel(QWidget):
    """Shows the final score, the rating message and the continent breakdown."""

    def __init__(self, on_play_again: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_play_again = on_play_again
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(GAME_OVER_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet("font-size: 36pt; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.message_label)

        self.breakdown_list = QListWidget(self)
        self.breakdown_list.setAlternatingRowColors(True)
        layout.addWidget(self.breakdown_list, stretch=1)

        self.play_again_button = QPushButton(PLAY_AGAIN_BUTTON_TEXT, self)
        self.play_again_button.setStyleSheet(Styles.get_primary_button_style())
        self.play_again_button.clicked.connect(self.on_play_again)
        layout.addWidget(self.play_again_button, alignment=Qt.AlignHCenter)

    def show_summary(self, summary: SessionSummary) -> None:
        self.breakdown_list.clear()

        if summary.mode is PresentationMode.SCORED_PERCENTAGE:
            self.score_label.setText(f"{summary.percentage}%")
            self.message_label.setText(summary.message or "")
            for row in summary.breakdown:
                QListWidgetItem(
                    BREAKDOWN_ROW_TEMPLATE.format(
                        continent=row.continent,
                        percentage=row.percentage,
                        correct=row.correct,
                        total=row.total,
                    ),
                    self.breakdown_list,
                )
            self.breakdown_list.setVisible(True)
            return

        self.score_label.setText(f"{summary.score}")
        template = NEW_BEST_TEMPLATE if summary.is_new_high_score else BEST_SCORE_TEMPLATE
        self.message_label.setText(template.format(high_score=summary.high_score))
        self.breakdown_list.setVisible(False)
