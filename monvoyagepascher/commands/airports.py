"""Airports command - search airports by location or country."""

from __future__ import annotations

from typing import Any

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.api_client import APIResponse
from monvoyagepascher.core.params import AirportSearch
from monvoyagepascher.ui.console import print_title
from monvoyagepascher.ui.tables import Column, print_table

AIRPORT_COLUMNS = [
    Column("iata_code", "IATA"),
    Column("name", "Airport Name", default="Unknown"),
    Column("municipality", "City"),
    Column("iso_country", "Country"),
    Column("elevation_ft", "Elevation (ft)"),
]


class AirportsCommand(BaseCommand):
    """Search airports by coordinates, radius or country."""

    name = "airports"
    description = "Search airports by location, country, or IATA code"
    usage = "airports [--location LAT,LONG] [--radius KM] [--country CODE] [--top] [--language LANG] [--json]"
    options = ("location", "radius", "country", "top", "language", "json")
    max_positionals = 0
    boolean_flags = frozenset({"json", "top"})

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        query = AirportSearch(
            location=self.option(flags, "location"),
            radius=self.option(flags, "radius"),
            countrycode=self.option(flags, "country"),
            top_airports=bool(flags.get("top")),
            language=self.option(flags, "language"),
        )

        response = self.request("Searching airports...", lambda api: api.search_airports(query))
        return self.output(response, flags, self._render)

    def _render(self, response: APIResponse) -> None:
        print_title("Airports")
        print_table(response.records, AIRPORT_COLUMNS)
