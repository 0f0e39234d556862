"""Service for managing the state of one quiz run."""

from __future__ import annotations

import random

from flag_quiz.constants.game_constants import MAX_DISTRACTORS
from flag_quiz.core.models import Country, Question
from flag_quiz.core.services.country_repository import CountryRepository


class GameSession:
    """Score, remaining pool and current question of a single session.

    A fresh instance is created on every start so nothing leaks between
    sessions. The repository is only read: distractors come from the whole
    continent, not from the remaining pool.
    """

    def __init__(self, repository: CountryRepository, rng: random.Random | None = None) -> None:
        self._repository = repository
        self._countries: tuple[Country, ...] = tuple(repository.get_countries())
        self._rng = rng or random.Random()
        self._remaining: list[Country] = list(self._countries)
        self._score: int = 0
        self._current_question: Question | None = None
        self._is_answered: bool = False
        self._finished: bool = False

    @property
    def score(self) -> int:
        return self._score

    @property
    def total_count(self) -> int:
        return len(self._countries)

    @property
    def asked_count(self) -> int:
        return len(self._countries) - len(self._remaining)

    @property
    def is_answered(self) -> bool:
        return self._is_answered

    @property
    def is_finished(self) -> bool:
        return self._finished

    def get_remaining(self) -> list[Country]:
        return list(self._remaining)

    def has_remaining(self) -> bool:
        return bool(self._remaining)

    def get_current_question(self) -> Question | None:
        return self._current_question

    def mark_finished(self) -> None:
        self._finished = True
        self._current_question = None

    def next_question(self) -> Question | None:
        """Draw the next country from the pool and build its options.

        Returns None when the pool is exhausted.
        """
        if self._finished or not self._remaining:
            return None

        index = self._rng.randrange(len(self._remaining))
        correct = self._remaining.pop(index)

        candidates = [
            c for c in self._repository.get_countries_on_continent(correct.continent)
            if c.code != correct.code
        ]
        self._rng.shuffle(candidates)
        options = [correct, *candidates[:MAX_DISTRACTORS]]
        self._rng.shuffle(options)

        self._current_question = Question(correct_answer=correct, options=tuple(options))
        self._is_answered = False
        return self._current_question

    def record_answer(self, selected: Country) -> bool | None:
        """Score the selection and drop the question.

        Returns None when the answer is ignored (nothing to answer, or the
        question was already answered).
        """
        if self._current_question is None or self._is_answered:
            return None
        self._is_answered = True
        is_correct = selected.code == self._current_question.correct_answer.code
        if is_correct:
            self._score += 1
        self._current_question = None
        return is_correct
