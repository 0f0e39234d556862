"""Settings dialog for configuring FlagQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from flag_quiz.core.models import PresentationMode

_MODE_LABELS = {
    PresentationMode.SCORED_PERCENTAGE: "Percentage with continent breakdown",
    PresentationMode.HIGH_SCORE: "Raw score with best score",
}


class SettingsDialog(QDialog):
    """Dialog for configuring game settings."""

    def __init__(
        self,
        parent=None,
        presentation_mode: PresentationMode = PresentationMode.SCORED_PERCENTAGE,
        sound_enabled: bool = True,
        persist_high_score: bool = False,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._presentation_mode = presentation_mode
        self._sound_enabled = sound_enabled
        self._persist_high_score = persist_high_score
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Game settings group
        game_group = QGroupBox("Game")
        game_layout = QVBoxLayout()
        game_group.setLayout(game_layout)

        mode_row = QHBoxLayout()
        mode_label = QLabel("End screen:")
        mode_label.setToolTip("Applies to the summary shown when the current game ends.")
        self.mode_combo = QComboBox()
        for mode, label in _MODE_LABELS.items():
            self.mode_combo.addItem(label, userData=mode)
        self.mode_combo.setCurrentIndex(self.mode_combo.findData(self._presentation_mode))
        mode_row.addWidget(mode_label)
        mode_row.addStretch()
        mode_row.addWidget(self.mode_combo)
        game_layout.addLayout(mode_row)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed (0 = random):")
        seed_label.setToolTip("A fixed seed replays the same order of flags and options.")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999_999)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        game_layout.addLayout(seed_row)

        self.persist_checkbox = QCheckBox("Save new best scores to disk")
        self.persist_checkbox.setToolTip("When disabled the stored best score is only read.")
        self.persist_checkbox.setChecked(self._persist_high_score)
        game_layout.addWidget(self.persist_checkbox)

        layout.addWidget(game_group)

        # Sound group
        sound_group = QGroupBox("Sound")
        sound_layout = QVBoxLayout()
        sound_group.setLayout(sound_layout)

        self.sound_checkbox = QCheckBox("Play sound effects")
        self.sound_checkbox.setChecked(self._sound_enabled)
        sound_layout.addWidget(self.sound_checkbox)

        layout.addWidget(sound_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_presentation_mode(self) -> PresentationMode:
        return self.mode_combo.currentData()

    def get_shuffle_seed(self) -> int | None:
        """Get the selected seed, None when left at 0."""
        value = self.seed_spinbox.value()
        return value or None

    def get_persist_high_score(self) -> bool:
        return self.persist_checkbox.isChecked()

    def get_sound_enabled(self) -> bool:
        return self.sound_checkbox.isChecked()
