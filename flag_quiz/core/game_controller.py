"""Business logic for running a flag quiz, shared between the Qt UI and the web API."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import random
from threading import Lock

from flag_quiz.core.models import (
    AnswerResult,
    ContinentStat,
    Country,
    GameState,
    OptionView,
    PresentationMode,
    Question,
    QuestionView,
    SessionSummary,
)
from flag_quiz.core.services.continent_stats import ContinentStats
from flag_quiz.core.services.country_repository import CountryRepository
from flag_quiz.core.services.game_session import GameSession
from flag_quiz.core.services.high_score_store import HighScoreStore
from flag_quiz.core.sound_cues import NullCuePlayer, SoundCuePlayer
from flag_quiz.core.summary import build_summary

logger = logging.getLogger(__name__)


class GameController:
    """Facade over the quiz services: Repository, GameSession, ContinentStats and HighScoreStore.

    All public methods take the same lock, so the web mode can call the
    controller from FastAPI's worker threads without double-scoring an
    answer.
    """

    def __init__(
        self,
        countries: Sequence[Country],
        *,
        presentation_mode: PresentationMode = PresentationMode.SCORED_PERCENTAGE,
        high_score_store: HighScoreStore | None = None,
        cue_player: SoundCuePlayer | None = None,
        shuffle_seed: int | None = None,
    ) -> None:
        self._lock = Lock()

        # Services
        self._repository = CountryRepository(countries)
        self._stats = ContinentStats()
        self._high_score_store = high_score_store
        self._cue_player: SoundCuePlayer = cue_player or NullCuePlayer()

        self._mode = presentation_mode
        self._rng = random.Random(shuffle_seed)
        self._high_score = high_score_store.load() if high_score_store else 0

        self._session = self._new_session()
        self._started = False
        self._last_view: QuestionView | None = None
        self._last_result: AnswerResult | None = None
        self._summary: SessionSummary | None = None

    # --- Session lifecycle ---

    def start(self) -> QuestionView | None:
        """Reset everything and present the first question."""
        with self._lock:
            self._session = self._new_session()
            self._started = True
            self._last_view = None
            self._last_result = None
            self._summary = None
            logger.info(
                "Starting session over %d countries (%s mode)",
                self._repository.get_country_count(),
                self._mode.value,
            )
            return self._generate_question_locked()

    def generate_question(self) -> QuestionView | None:
        """Present the next question, or end the session when the pool is empty."""
        with self._lock:
            return self._generate_question_locked()

    def handle_answer(self, selected: Country) -> AnswerResult | None:
        """Score the selected option. Ignored (returns None) unless a question is waiting."""
        with self._lock:
            return self._handle_answer_locked(selected)

    def answer_with_code(self, code: str) -> AnswerResult | None:
        """Answer by option identifier.

        Returns None when there is nothing to answer. Raises ValueError when
        the code is not one of the current options.
        """
        with self._lock:
            question = self._session.get_current_question()
            if question is None or self._session.is_answered:
                return None
            selected = question.find_option(code)
            if selected is None:
                raise ValueError(f"'{code}' is not one of the current options.")
            return self._handle_answer_locked(selected)

    def advance(self) -> GameState:
        """Move past an answered question in one step.

        Raises RuntimeError when no session was started or the current
        question still waits for an answer. Returns the state after the next
        question was drawn, or after the session ended.
        """
        with self._lock:
            if not self._started:
                raise RuntimeError("The game has not been started.")
            if self._is_question_pending_locked():
                raise RuntimeError("Answer the current question first.")
            self._generate_question_locked()
            return self._state_locked()

    def end(self) -> SessionSummary:
        """Finish the session and return the summary. Repeated calls are no-ops."""
        with self._lock:
            return self._end_locked()

    def get_state(self) -> GameState:
        with self._lock:
            return self._state_locked()

    # --- Read-only state ---

    def current_question_view(self) -> QuestionView | None:
        """Last presented question, kept for display after it has been answered."""
        with self._lock:
            return self._last_view

    def is_finished(self) -> bool:
        with self._lock:
            return self._summary is not None

    def is_in_progress(self) -> bool:
        with self._lock:
            return self._started and self._summary is None and self._session.asked_count > 0

    def get_summary(self) -> SessionSummary | None:
        with self._lock:
            return self._summary

    def get_score(self) -> int:
        with self._lock:
            return self._session.score

    def get_progress(self) -> tuple[int, int]:
        """(asked, total) for the progress counter."""
        with self._lock:
            return self._session.asked_count, self._session.total_count

    def get_remaining_count(self) -> int:
        with self._lock:
            return len(self._session.get_remaining())

    def get_country_count(self) -> int:
        with self._lock:
            return self._repository.get_country_count()

    def get_continent_stats(self) -> dict[str, ContinentStat]:
        with self._lock:
            return self._stats.snapshot()

    def get_high_score(self) -> int:
        with self._lock:
            return self._high_score

    # --- Settings ---

    def set_presentation_mode(self, mode: PresentationMode) -> None:
        with self._lock:
            self._mode = mode

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._rng.seed(seed)

    def set_cue_player(self, cue_player: SoundCuePlayer | None) -> None:
        with self._lock:
            self._cue_player = cue_player or NullCuePlayer()

    def set_high_score_persistence(self, enabled: bool) -> None:
        with self._lock:
            if self._high_score_store is not None:
                self._high_score_store.set_write_enabled(enabled)

    # --- Internals (caller holds the lock) ---

    def _new_session(self) -> GameSession:
        self._stats.initialize_continents(self._repository.get_continents())
        return GameSession(self._repository, rng=self._rng)

    def _is_question_pending_locked(self) -> bool:
        return self._session.get_current_question() is not None and not self._session.is_answered

    def _state_locked(self) -> GameState:
        return GameState(
            started=self._started,
            score=self._session.score,
            asked_count=self._session.asked_count,
            total_count=self._session.total_count,
            question=None if self._summary is not None else self._last_view,
            awaiting_answer=self._is_question_pending_locked(),
            last_result=self._last_result,
            summary=self._summary,
        )

    def _generate_question_locked(self) -> QuestionView | None:
        if self._summary is not None:
            return None
        question = self._session.next_question()
        if question is None:
            self._end_locked()
            return None
        self._stats.record_question(question.correct_answer.continent)
        self._last_view = self._build_view(question)
        self._last_result = None
        return self._last_view

    def _handle_answer_locked(self, selected: Country) -> AnswerResult | None:
        question = self._session.get_current_question()
        if question is None:
            return None
        is_correct = self._session.record_answer(selected)
        if is_correct is None:
            return None

        correct = question.correct_answer
        if is_correct:
            self._stats.record_correct(correct.continent)
            self._cue_player.play_win()
        else:
            self._cue_player.play_lose()

        self._last_result = AnswerResult(
            is_correct=is_correct,
            selected_code=selected.code,
            correct_code=correct.code,
            correct_name=correct.name,
            score=self._session.score,
        )
        return self._last_result

    def _end_locked(self) -> SessionSummary:
        if self._summary is not None:
            return self._summary

        self._session.mark_finished()
        score = self._session.score
        self._summary = build_summary(
            self._mode,
            score=score,
            total_questions=self._session.total_count,
            breakdown=self._stats.get_breakdown(),
            high_score=self._high_score,
        )
        if score > self._high_score:
            self._high_score = score
            if self._high_score_store is not None:
                self._high_score_store.save_if_higher(score)

        logger.info("Session finished: %d/%d correct", score, self._session.total_count)
        self._cue_player.play_win()
        return self._summary

    def _build_view(self, question: Question) -> QuestionView:
        correct = question.correct_answer
        return QuestionView(
            flag_url=correct.flag_url,
            continent_hint=correct.continent,
            options=tuple(OptionView(code=c.code, label=c.name) for c in question.options),
            asked_count=self._session.asked_count,
            total_count=self._session.total_count,
            score=self._session.score,
        )
