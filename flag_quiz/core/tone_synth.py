"""Small oscillator-based synthesizer for the game's sound cues.

Produces float samples in [-1, 1] and packs them into 16-bit mono WAV data,
so the Qt side can play cues through QSoundEffect without shipping audio
files.
"""

from __future__ import annotations

from array import array
import io
import math
import wave

from flag_quiz.constants.game_constants import (
    LOSE_DURATION_SECONDS,
    LOSE_FREQUENCIES,
    LOSE_WAVEFORM,
    SAMPLE_RATE,
    TONE_FLOOR,
    TONE_GAIN,
    WIN_ARPEGGIO_FREQUENCIES,
    WIN_NOTE_DURATION_SECONDS,
    WIN_NOTE_FLOOR,
    WIN_NOTE_GAIN,
    WIN_NOTE_SPACING_SECONDS,
)

WAVEFORMS = ("sine", "square", "sawtooth", "triangle")


def _oscillate(waveform: str, phase: float) -> float:
    """Value of a unit-amplitude waveform at phase (in cycles)."""
    cycle = phase % 1.0
    if waveform == "sine":
        return math.sin(2 * math.pi * cycle)
    if waveform == "square":
        return 1.0 if cycle < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * cycle - 1.0
    if waveform == "triangle":
        return 4.0 * cycle - 1.0 if cycle < 0.5 else 3.0 - 4.0 * cycle
    raise ValueError(f"Unsupported waveform '{waveform}'. Use one of {', '.join(WAVEFORMS)}.")


def render_tone(
    frequency: float,
    waveform: str,
    duration: float,
    *,
    gain: float = TONE_GAIN,
    floor: float = TONE_FLOOR,
    sample_rate: int = SAMPLE_RATE,
) -> list[float]:
    """Render one note with an exponential decay from gain down to floor."""
    if frequency <= 0:
        raise ValueError("Frequency must be positive.")
    if duration <= 0:
        raise ValueError("Duration must be positive.")
    if not 0 < floor <= gain:
        raise ValueError("Gain floor must be positive and not above the gain.")

    count = max(1, int(round(duration * sample_rate)))
    ratio = floor / gain
    samples: list[float] = []
    for index in range(count):
        t = index / sample_rate
        envelope = gain * ratio ** (t / duration)
        samples.append(envelope * _oscillate(waveform, frequency * t))
    return samples


def mix(tracks: list[tuple[float, list[float]]], sample_rate: int = SAMPLE_RATE) -> list[float]:
    """Sum (offset_seconds, samples) tracks into one buffer."""
    if not tracks:
        return []
    placed = [(int(round(offset * sample_rate)), samples) for offset, samples in tracks]
    length = max(start + len(samples) for start, samples in placed)
    buffer = [0.0] * length
    for start, samples in placed:
        for index, value in enumerate(samples):
            buffer[start + index] += value
    return buffer


def render_win(sample_rate: int = SAMPLE_RATE) -> list[float]:
    """Ascending major arpeggio."""
    tracks = [
        (
            index * WIN_NOTE_SPACING_SECONDS,
            render_tone(
                frequency,
                "sine",
                WIN_NOTE_DURATION_SECONDS,
                gain=WIN_NOTE_GAIN,
                floor=WIN_NOTE_FLOOR,
                sample_rate=sample_rate,
            ),
        )
        for index, frequency in enumerate(WIN_ARPEGGIO_FREQUENCIES)
    ]
    return mix(tracks, sample_rate)


def render_lose(sample_rate: int = SAMPLE_RATE) -> list[float]:
    """Two slightly detuned low sawtooth tones played together."""
    tracks = [
        (0.0, render_tone(frequency, LOSE_WAVEFORM, LOSE_DURATION_SECONDS, sample_rate=sample_rate))
        for frequency in LOSE_FREQUENCIES
    ]
    return mix(tracks, sample_rate)


def to_wav_bytes(samples: list[float], sample_rate: int = SAMPLE_RATE) -> bytes:
    """Pack float samples into a 16-bit mono PCM WAV file."""
    pcm = array("h", (int(max(-1.0, min(1.0, value)) * 32767) for value in samples))
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(pcm.tobytes())
    return buffer.getvalue()
