"""Helpers that turn the final score into a summary."""

from __future__ import annotations

from collections.abc import Sequence

from flag_quiz.constants.game_constants import FALLBACK_RATING, RATING_THRESHOLDS
from flag_quiz.core.models import (
    ContinentBreakdownRow,
    PresentationMode,
    SessionSummary,
    percentage_of,
)


def rating_for(percentage: int) -> str:
    for lower_bound, message in RATING_THRESHOLDS:
        if percentage >= lower_bound:
            return message
    return FALLBACK_RATING


def build_summary(
    mode: PresentationMode,
    score: int,
    total_questions: int,
    breakdown: Sequence[ContinentBreakdownRow] = (),
    high_score: int = 0,
) -> SessionSummary:
    """Build the summary for the given presentation mode.

    Args:
        mode: Which of the two end screens to produce.
        score: Correct answers in the finished session.
        total_questions: Size of the dataset the session ran over.
        breakdown: Per-continent rows, already sorted.
        high_score: Best score known before this session ended.
    """
    if mode is PresentationMode.SCORED_PERCENTAGE:
        percentage = percentage_of(score, total_questions)
        return SessionSummary(
            mode=mode,
            score=score,
            total_questions=total_questions,
            percentage=percentage,
            message=rating_for(percentage),
            breakdown=tuple(breakdown),
        )

    is_new_high_score = score > high_score
    return SessionSummary(
        mode=mode,
        score=score,
        total_questions=total_questions,
        high_score=max(score, high_score),
        is_new_high_score=is_new_high_score,
    )
