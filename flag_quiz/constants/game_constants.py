"""Game-related constants shared across UI, server and core layers."""

MAX_DISTRACTORS: int = 5
MAX_OPTIONS: int = MAX_DISTRACTORS + 1

FLAG_URL_TEMPLATE: str = "https://flagcdn.com/w640/{code}.png"

HIGH_SCORE_KEY: str = "flagQuizHighScore"
DEFAULT_HIGH_SCORE_PATH: str = "~/.flag_quiz/high_score.json"

# Lower bound of the percentage band -> message. Checked top to bottom.
RATING_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (100, "Perfect!"),
    (90, "Epic!"),
    (80, "Very Good!"),
    (70, "Good"),
    (60, "Acceptable"),
)
FALLBACK_RATING: str = "Needs practice"

# Tone parameters (Hz / seconds)
WIN_ARPEGGIO_FREQUENCIES: tuple[float, ...] = (523.25, 659.25, 783.99, 1046.50)
WIN_NOTE_SPACING_SECONDS: float = 0.1
WIN_NOTE_DURATION_SECONDS: float = 0.3
WIN_NOTE_GAIN: float = 0.05
WIN_NOTE_FLOOR: float = 0.001

LOSE_FREQUENCIES: tuple[float, ...] = (150.0, 140.0)
LOSE_WAVEFORM: str = "sawtooth"
LOSE_DURATION_SECONDS: float = 0.4

TONE_GAIN: float = 0.1
TONE_FLOOR: float = 0.0001
SAMPLE_RATE: int = 44100
