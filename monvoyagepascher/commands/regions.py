"""Countries and continents commands."""

from __future__ import annotations

from typing import Any

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.api_client import APIResponse
from monvoyagepascher.core.params import ContinentQuery, CountryQuery
from monvoyagepascher.ui.console import print_title
from monvoyagepascher.ui.tables import Column, count_items, format_number, print_table

COUNTRY_COLUMNS = [
    Column("cca2", "Code"),
    Column("name", "Country", default="Unknown"),
    Column("capital", "Capital"),
    Column("population", "Population", format=format_number),
    Column("area", "Area (km²)", format=format_number),
]

CONTINENT_COLUMNS = [
    Column("code", "Code"),
    Column("name", "Continent", default="Unknown"),
    Column("countries", "Countries", format=count_items),
]


class CountriesCommand(BaseCommand):
    """List all countries or fetch one by code."""

    name = "countries"
    description = "List all countries or get specific country data"
    usage = "countries [code] [--language LANG] [--json]"
    aliases = ["country"]
    options = ("language", "json")
    max_positionals = 1

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        code = remaining[0] if remaining else None
        query = CountryQuery(countrycode=code, language=self.option(flags, "language"))

        message = f"Fetching data for {code}..." if code else "Fetching countries..."
        response = self.request(message, lambda api: api.get_countries(query))
        return self.output(response, flags, self._render)

    def _render(self, response: APIResponse) -> None:
        print_title("Countries")
        print_table(response.records, COUNTRY_COLUMNS)


class ContinentsCommand(BaseCommand):
    """List continents or fetch one by code."""

    name = "continents"
    description = "Get continent information"
    usage = "continents [code] [--language LANG] [--json]"
    aliases = ["continent"]
    options = ("language", "json")
    max_positionals = 1

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        query = ContinentQuery(
            code=remaining[0] if remaining else None,
            language=self.option(flags, "language"),
        )

        response = self.request("Fetching continents...", lambda api: api.get_continents(query))
        return self.output(response, flags, self._render)

    def _render(self, response: APIResponse) -> None:
        print_title("Continents")
        print_table(response.records, CONTINENT_COLUMNS)
