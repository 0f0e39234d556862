"""Qt playback of the synthesized sound cues."""

from __future__ import annotations

import logging
from pathlib import Path
import tempfile

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from flag_quiz.core.tone_synth import render_lose, render_tone, render_win, to_wav_bytes

logger = logging.getLogger(__name__)


class SoundManager(QObject):
    """Plays win/lose cues and ad-hoc tones through QSoundEffect.

    Cues are rendered once into WAV files in a private temporary directory.
    Without an audio device QSoundEffect simply stays silent.
    """

    def __init__(self, enabled: bool = True, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._temp_dir = tempfile.TemporaryDirectory(prefix="flag_quiz_sounds_")
        self._effects: dict[str, QSoundEffect] = {}
        self._win_effect = self._create_effect("win", render_win())
        self._lose_effect = self._create_effect("lose", render_lose())

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play_win(self) -> None:
        self._play(self._win_effect)

    def play_lose(self) -> None:
        self._play(self._lose_effect)

    def play_tone(self, frequency: float, waveform: str, duration: float) -> None:
        if not self._enabled:
            return
        key = f"tone_{waveform}_{frequency:g}_{duration:g}"
        effect = self._effects.get(key)
        if effect is None:
            try:
                samples = render_tone(frequency, waveform, duration)
            except ValueError as exc:
                logger.warning("Skipping tone: %s", exc)
                return
            effect = self._create_effect(key, samples)
        self._play(effect)

    def _play(self, effect: QSoundEffect | None) -> None:
        if not self._enabled or effect is None:
            return
        if effect.isPlaying():
            effect.stop()
        effect.play()

    def _create_effect(self, name: str, samples: list[float]) -> QSoundEffect | None:
        path = Path(self._temp_dir.name) / f"{name}.wav"
        try:
            path.write_bytes(to_wav_bytes(samples))
        except OSError as exc:
            logger.warning("Could not write sound cue %s: %s", path, exc)
            return None
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(1.0)
        self._effects[name] = effect
        return effect
