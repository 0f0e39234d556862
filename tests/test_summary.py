"""Tests for percentage rounding, ratings and summary building."""

from __future__ import annotations

import pytest

from flag_quiz.core.models import ContinentBreakdownRow, PresentationMode, percentage_of
from flag_quiz.core.summary import build_summary, rating_for


class TestPercentage:
    """Tests for percentage_of."""

    def test_zero_total_is_zero(self) -> None:
        assert percentage_of(0, 0) == 0

    @pytest.mark.parametrize(
        ("correct", "total", "expected"),
        [
            (7, 10, 70),
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),  # 12.5 rounds up
            (10, 10, 100),
        ],
    )
    def test_rounds_half_up(self, correct: int, total: int, expected: int) -> None:
        assert percentage_of(correct, total) == expected


class TestRating:
    """Tests for rating_for."""

    @pytest.mark.parametrize(
        ("percentage", "message"),
        [
            (100, "Perfect!"),
            (99, "Epic!"),
            (90, "Epic!"),
            (89, "Very Good!"),
            (80, "Very Good!"),
            (70, "Good"),
            (60, "Acceptable"),
            (59, "Needs practice"),
            (0, "Needs practice"),
        ],
    )
    def test_bands(self, percentage: int, message: str) -> None:
        assert rating_for(percentage) == message


class TestBuildSummary:
    """Tests for build_summary."""

    def test_percentage_mode(self) -> None:
        rows = [ContinentBreakdownRow("Europe", 5, 6, 83)]
        summary = build_summary(PresentationMode.SCORED_PERCENTAGE, score=7, total_questions=10, breakdown=rows)

        assert summary.percentage == 70
        assert summary.message == "Good"
        assert summary.breakdown == tuple(rows)
        assert summary.high_score is None

    def test_percentage_mode_with_no_questions(self) -> None:
        summary = build_summary(PresentationMode.SCORED_PERCENTAGE, score=0, total_questions=0)

        assert summary.percentage == 0
        assert summary.message == "Needs practice"

    def test_high_score_mode_new_record(self) -> None:
        summary = build_summary(PresentationMode.HIGH_SCORE, score=12, total_questions=20, high_score=9)

        assert summary.high_score == 12
        assert summary.is_new_high_score
        assert summary.percentage is None
        assert summary.message is None

    def test_high_score_mode_tie_is_not_a_record(self) -> None:
        summary = build_summary(PresentationMode.HIGH_SCORE, score=9, total_questions=20, high_score=9)

        assert summary.high_score == 9
        assert not summary.is_new_high_score
