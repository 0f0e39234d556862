"""Service holding the read-only country dataset."""

from __future__ import annotations

from collections.abc import Iterable

from flag_quiz.core.models import Country


class CountryRepository:
    """Stores the dataset in its original order and groups it by continent."""

    def __init__(self, countries: Iterable[Country] = ()) -> None:
        self._countries: tuple[Country, ...] = ()
        self._by_continent: dict[str, tuple[Country, ...]] = {}
        self.load_countries(countries)

    def load_countries(self, countries: Iterable[Country]) -> None:
        """Replace the dataset. Codes must be unique after normalization."""
        prepared = [self._prepare_country(c) for c in countries]

        seen: set[str] = set()
        for country in prepared:
            if country.code in seen:
                raise ValueError(f"Duplicate country code '{country.code}'.")
            seen.add(country.code)

        grouped: dict[str, list[Country]] = {}
        for country in prepared:
            grouped.setdefault(country.continent, []).append(country)

        self._countries = tuple(prepared)
        self._by_continent = {name: tuple(members) for name, members in grouped.items()}

    def get_countries(self) -> list[Country]:
        return list(self._countries)

    def get_country_count(self) -> int:
        return len(self._countries)

    def get_continents(self) -> list[str]:
        """Continent names in alphabetical order."""
        return sorted(self._by_continent)

    def get_countries_on_continent(self, continent: str) -> list[Country]:
        return list(self._by_continent.get(continent, ()))

    @staticmethod
    def _prepare_country(country: Country) -> Country:
        code = country.code.strip().upper()
        name = country.name.strip()
        continent = country.continent.strip()
        if not code:
            raise ValueError("Country code must not be empty.")
        if not name:
            raise ValueError(f"Country '{code}' has an empty name.")
        if not continent:
            raise ValueError(f"Country '{code}' has an empty continent.")
        return Country(code=code, name=name, continent=continent)
