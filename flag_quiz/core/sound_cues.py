"""Interface between the controller and whatever plays the audio cues."""

from __future__ import annotations

from typing import Protocol


class SoundCuePlayer(Protocol):
    """Fire-and-forget cues. Implementations must never raise."""

    def play_win(self) -> None: ...

    def play_lose(self) -> None: ...

    def play_tone(self, frequency: float, waveform: str, duration: float) -> None: ...


class NullCuePlayer:
    """Inert player used when no audio output is available."""

    def play_win(self) -> None:
        pass

    def play_lose(self) -> None:
        pass

    def play_tone(self, frequency: float, waveform: str, duration: float) -> None:
        pass
