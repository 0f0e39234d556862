"""Tests for the cue synthesizer."""

from __future__ import annotations

from array import array
import io
import wave

import pytest

from flag_quiz.core import tone_synth


class TestRenderTone:
    def test_sample_count_and_decay(self) -> None:
        samples = tone_synth.render_tone(440.0, "square", 0.1, gain=0.1, floor=0.001, sample_rate=1000)

        assert len(samples) == 100
        assert abs(samples[0]) == pytest.approx(0.1)
        assert abs(samples[-1]) < abs(samples[0])
        assert max(abs(s) for s in samples) <= 0.1 + 1e-9

    @pytest.mark.parametrize("waveform", tone_synth.WAVEFORMS)
    def test_supported_waveforms_stay_in_range(self, waveform: str) -> None:
        samples = tone_synth.render_tone(220.0, waveform, 0.05, sample_rate=8000)
        assert all(-1.0 <= s <= 1.0 for s in samples)

    def test_unknown_waveform(self) -> None:
        with pytest.raises(ValueError, match="Unsupported waveform"):
            tone_synth.render_tone(440.0, "noise", 0.1)

    @pytest.mark.parametrize(
        ("frequency", "duration", "floor"),
        [(0.0, 0.1, 0.001), (440.0, 0.0, 0.001), (440.0, 0.1, 0.0)],
    )
    def test_invalid_parameters(self, frequency: float, duration: float, floor: float) -> None:
        with pytest.raises(ValueError):
            tone_synth.render_tone(frequency, "sine", duration, floor=floor)


class TestCues:
    def test_mix_offsets_tracks(self) -> None:
        buffer = tone_synth.mix([(0.0, [1.0, 1.0]), (0.002, [0.5])], sample_rate=1000)
        assert buffer == [1.0, 1.0, 0.5]

    def test_win_cue_spans_four_notes(self) -> None:
        """Last note starts after three spacings and lasts one note length."""
        rate = 1000
        samples = tone_synth.render_win(sample_rate=rate)
        expected = round(3 * 0.1 * rate) + round(0.3 * rate)
        assert len(samples) == expected

    def test_lose_cue_length(self) -> None:
        samples = tone_synth.render_lose(sample_rate=1000)
        assert len(samples) == 400

    def test_wav_bytes_are_valid_wav(self) -> None:
        data = tone_synth.to_wav_bytes([0.0, 0.5, -0.5, 2.0], sample_rate=8000)

        with wave.open(io.BytesIO(data), "rb") as wav_file:
            assert wav_file.getnchannels() == 1
            assert wav_file.getsampwidth() == 2
            assert wav_file.getframerate() == 8000
            assert wav_file.getnframes() == 4

    def test_wav_samples_are_not_byte_swapped(self) -> None:
        """Reading the file back yields the written samples on any host."""
        data = tone_synth.to_wav_bytes([0.0, 0.5, -0.5, 2.0], sample_rate=8000)

        with wave.open(io.BytesIO(data), "rb") as wav_file:
            frames = wav_file.readframes(4)

        assert frames == array("h", [0, 16383, -16383, 32767]).tobytes()

    def test_wav_payload_is_little_endian(self) -> None:
        data = tone_synth.to_wav_bytes([0.5], sample_rate=8000)
        # single-sample file: the PCM payload is the last two bytes
        assert data[-2:] == (16383).to_bytes(2, "little", signed=True)
