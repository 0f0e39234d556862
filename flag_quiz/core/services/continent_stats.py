"""Service for tracking per-continent results."""

from __future__ import annotations

from collections.abc import Iterable

from flag_quiz.core.models import ContinentBreakdownRow, ContinentStat


class ContinentStats:
    """Tracks correct/total counters keyed by continent name."""

    def __init__(self) -> None:
        self._stats: dict[str, ContinentStat] = {}

    def initialize_continents(self, continents: Iterable[str]) -> None:
        """Reset all counters to zero for the given continents."""
        self.clear()
        for name in continents:
            self._stats[name] = ContinentStat()

    def record_question(self, continent: str) -> None:
        self._entry(continent).total += 1

    def record_correct(self, continent: str) -> None:
        entry = self._entry(continent)
        if entry.correct >= entry.total:
            raise RuntimeError(
                f"Continent '{continent}' cannot have more correct answers than questions."
            )
        entry.correct += 1

    def snapshot(self) -> dict[str, ContinentStat]:
        return {
            name: ContinentStat(correct=entry.correct, total=entry.total)
            for name, entry in self._stats.items()
        }

    def get_breakdown(self) -> list[ContinentBreakdownRow]:
        """Rows sorted alphabetically by continent name."""
        return [
            ContinentBreakdownRow(
                continent=name,
                correct=entry.correct,
                total=entry.total,
                percentage=entry.percentage,
            )
            for name, entry in sorted(self._stats.items())
        ]

    def clear(self) -> None:
        self._stats.clear()

    def _entry(self, continent: str) -> ContinentStat:
        entry = self._stats.get(continent)
        if entry is None:
            entry = ContinentStat()
            self._stats[continent] = entry
        return entry
