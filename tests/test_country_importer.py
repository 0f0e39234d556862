"""Tests for the plain-text country dataset importer."""

from __future__ import annotations

from pathlib import Path

import pytest

from flag_quiz.core.country_importer import (
    CountryImportError,
    load_countries_from_file,
    load_default_countries,
    parse_country_text,
)
from flag_quiz.core.models import Country


class TestParseCountryText:
    def test_parses_lines_and_skips_comments(self) -> None:
        text = "# header\n\nfr | France | Europe\n  JP|Japan|Asia  \n"

        countries = parse_country_text(text)

        assert countries == [Country("FR", "France", "Europe"), Country("JP", "Japan", "Asia")]

    def test_wrong_field_count(self) -> None:
        with pytest.raises(CountryImportError, match="Line 2"):
            parse_country_text("FR | France | Europe\nDE | Germany\n")

    def test_empty_field(self) -> None:
        with pytest.raises(CountryImportError, match="cannot be empty"):
            parse_country_text("FR |  | Europe\n")

    def test_duplicate_code_reports_both_lines(self) -> None:
        with pytest.raises(CountryImportError, match="first seen on line 1"):
            parse_country_text("FR | France | Europe\nfr | France | Europe\n")


class TestLoadFromFile:
    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "countries.txt"
        path.write_text("BR | Brazil | South America\n", encoding="utf-8")

        dataset = load_countries_from_file(path)

        assert dataset.source_path == path
        assert dataset.countries == [Country("BR", "Brazil", "South America")]

    def test_file_without_countries(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("# nothing here\n", encoding="utf-8")

        with pytest.raises(CountryImportError):
            load_countries_from_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_countries_from_file(tmp_path / "missing.txt")

    def test_bundled_dataset(self) -> None:
        """The shipped list is valid and covers every inhabited continent."""
        dataset = load_default_countries()

        assert len(dataset.countries) > 150
        continents = {c.continent for c in dataset.countries}
        assert {"Africa", "Asia", "Europe", "North America", "South America", "Oceania"} <= continents
