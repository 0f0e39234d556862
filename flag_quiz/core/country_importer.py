"""Utilities for loading the country dataset from a plain-text file.

File format (one country per line, fields separated by ``|``):

    # comment lines and blank lines are ignored
    FR | France | Europe
    JP | Japan | Asia

The first field is the country code used for the flag image, the second the
displayed name and the third the continent used as hint and for grouping.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from flag_quiz.core.models import Country

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "countries.txt"

_FIELD_SEPARATOR = "|"
_COMMENT_PREFIX = "#"


class CountryImportError(Exception):
    """Raised when a dataset file cannot be parsed."""


@dataclass(slots=True)
class ImportedDataset:
    """Container for the parsed dataset and where it came from."""

    source_path: Path
    countries: list[Country]


def load_countries_from_file(file_path: Path) -> ImportedDataset:
    text = file_path.read_text(encoding="utf-8")
    countries = parse_country_text(text)
    if not countries:
        raise CountryImportError(f"Dataset file {file_path} did not contain any countries.")
    logger.info("Loaded %d countries from %s", len(countries), file_path)
    return ImportedDataset(source_path=file_path, countries=countries)


def load_default_countries() -> ImportedDataset:
    return load_countries_from_file(DEFAULT_DATASET_PATH)


def parse_country_text(text: str) -> list[Country]:
    countries: list[Country] = []
    seen_codes: dict[str, int] = {}
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_PREFIX):
            continue

        country = _parse_line(line, line_number)
        if country.code in seen_codes:
            raise CountryImportError(
                f"Line {line_number}: duplicate code '{country.code}' "
                f"(first seen on line {seen_codes[country.code]})."
            )
        seen_codes[country.code] = line_number
        countries.append(country)
    return countries


def _parse_line(line: str, line_number: int) -> Country:
    fields = [field.strip() for field in line.split(_FIELD_SEPARATOR)]
    if len(fields) != 3:
        raise CountryImportError(
            f"Line {line_number}: expected 'CODE | Name | Continent', got {len(fields)} field(s)."
        )
    code, name, continent = fields
    if not code or not name or not continent:
        raise CountryImportError(f"Line {line_number}: fields cannot be empty.")
    return Country(code=code.upper(), name=name, continent=continent)
