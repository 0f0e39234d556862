"""Tests for the bounded flag image cache."""

from __future__ import annotations

import pytest

flag_loader = pytest.importorskip("flag_quiz.ui.flag_loader")
FlagCache = flag_loader.FlagCache


class TestFlagCache:
    def test_evicts_least_recently_used(self) -> None:
        cache = FlagCache(limit=2)
        cache.put("fr", "France")
        cache.put("de", "Germany")
        cache.get("fr")

        cache.put("it", "Italy")

        assert len(cache) == 2
        assert cache.get("de") is None
        assert cache.get("fr") == "France"
        assert cache.get("it") == "Italy"

    def test_never_grows_past_limit(self) -> None:
        """A whole game's worth of flags keeps only the newest entries."""
        cache = FlagCache(limit=24)
        for index in range(200):
            cache.put(f"https://flagcdn.com/w640/{index}.png", index)

        assert len(cache) == 24
        assert cache.get("https://flagcdn.com/w640/199.png") == 199
        assert cache.get("https://flagcdn.com/w640/0.png") is None

    def test_replacing_an_entry_does_not_grow(self) -> None:
        cache = FlagCache(limit=3)
        cache.put("fr", "old")
        cache.put("fr", "new")

        assert len(cache) == 1
        assert cache.get("fr") == "new"

    def test_limit_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            FlagCache(limit=0)
