"""Domain models for the flag quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from flag_quiz.constants.game_constants import FLAG_URL_TEMPLATE


class PresentationMode(Enum):
    """How the end-of-session summary is presented."""

    SCORED_PERCENTAGE = "percentage"
    HIGH_SCORE = "high-score"


@dataclass(frozen=True, slots=True)
class Country:
    """A country from the static dataset."""

    code: str
    name: str
    continent: str

    @property
    def flag_url(self) -> str:
        return FLAG_URL_TEMPLATE.format(code=self.code.lower())


@dataclass(slots=True)
class ContinentStat:
    """Mutable per-continent counter; total is bumped when a question is asked."""

    correct: int = 0
    total: int = 0

    @property
    def percentage(self) -> int:
        return percentage_of(self.correct, self.total)


@dataclass(frozen=True, slots=True)
class Question:
    """A generated question: the answer plus the ordered options shown."""

    correct_answer: Country
    options: tuple[Country, ...]

    def find_option(self, code: str) -> Country | None:
        normalized = code.strip().upper()
        return next((c for c in self.options if c.code == normalized), None)


@dataclass(frozen=True, slots=True)
class OptionView:
    """One selectable label together with its opaque identifier."""

    code: str
    label: str


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Everything a front end needs to present a question."""

    flag_url: str
    continent_hint: str
    options: tuple[OptionView, ...]
    asked_count: int
    total_count: int
    score: int


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of an accepted answer."""

    is_correct: bool
    selected_code: str
    correct_code: str
    correct_name: str
    score: int


@dataclass(frozen=True, slots=True)
class ContinentBreakdownRow:
    continent: str
    correct: int
    total: int
    percentage: int


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final result of a finished session."""

    mode: PresentationMode
    score: int
    total_questions: int
    percentage: int | None = None
    message: str | None = None
    breakdown: tuple[ContinentBreakdownRow, ...] = field(default_factory=tuple)
    high_score: int | None = None
    is_new_high_score: bool = False


@dataclass(frozen=True, slots=True)
class GameState:
    """Consistent snapshot of the controller, taken under a single lock."""

    started: bool
    score: int
    asked_count: int
    total_count: int
    question: QuestionView | None
    awaiting_answer: bool
    last_result: AnswerResult | None
    summary: SessionSummary | None

    @property
    def finished(self) -> bool:
        return self.summary is not None


def percentage_of(correct: int, total: int) -> int:
    """Whole percentage rounded half up; zero when there is nothing to divide."""
    if total <= 0:
        return 0
    # int(x + 0.5) instead of round(): ties go up, never to even
    return int(correct * 100 / total + 0.5)
