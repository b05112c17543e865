"""Cities commands - text search, proximity search, significant cities."""

from __future__ import annotations

from typing import Any

from monvoyagepascher.commands.base import CommandGroup
from monvoyagepascher.core.errors import ValidationError
from monvoyagepascher.core.params import (
    CityProximitySearch,
    CityTextSearch,
    SignificantCitiesQuery,
)
from monvoyagepascher.ui.console import print_title
from monvoyagepascher.ui.tables import Column, format_number, print_table

NAME = Column("name", "City", default="Unknown")
COUNTRY = Column("country", "Country")
POPULATION = Column("population", "Population", format=format_number)

SEARCH_COLUMNS = [NAME, COUNTRY, POPULATION, Column("timezone", "Timezone")]
NEARBY_COLUMNS = [NAME, COUNTRY, POPULATION, Column("elevation", "Elevation (m)")]
SIGNIFICANT_COLUMNS = [NAME, COUNTRY, POPULATION, Column("capital", "Capital Status")]


class CitiesCommand(CommandGroup):
    """Search and discover cities."""

    name = "cities"
    description = "Search cities by name, proximity, or population"
    usage = (
        "cities search <query> [--country CODE] [--sort S] [--language LANG] [--json]\n"
        "  cities nearby [--location LAT,LONG] [--radius KM] [--country CODE] [--limit N]\n"
        "  cities significant [--country CODE] [--population PCT] [--location LAT,LONG] [--limit N]"
    )
    aliases = ["city"]
    options = ("location", "radius", "country", "population", "limit", "sort", "language", "json")
    subcommands = {
        "search": ("country", "sort", "language", "json"),
        "nearby": ("location", "radius", "country", "limit", "sort", "language", "json"),
        "significant": ("population", "location", "country", "limit", "sort", "language", "json"),
    }
    subcommand_positionals = {"nearby": 0, "significant": 0}

    def run_search(self, flags: dict[str, Any], args: list[str]) -> bool:
        if not args:
            raise ValidationError("Missing search query. Usage: cities search <query>")
        text = " ".join(args)

        query = CityTextSearch(
            query=text,
            countrycode=self.option(flags, "country"),
            sort=self.option(flags, "sort"),
            language=self.option(flags, "language"),
        )

        response = self.request(
            f'Searching cities for "{text}"...',
            lambda api: api.find_cities_from_text(query),
        )

        def render(response):
            print_title(f'Cities matching "{text}"')
            print_table(response.records, SEARCH_COLUMNS)

        return self.output(response, flags, render)

    def run_nearby(self, flags: dict[str, Any], args: list[str]) -> bool:
        location = self.option(flags, "location")
        query = CityProximitySearch(
            radius=self.option(flags, "radius"),
            countrycode=self.option(flags, "country"),
            limit=self.option(flags, "limit"),
            sort=self.option(flags, "sort"),
            language=self.option(flags, "language"),
        )
        if location:
            query.location = location

        response = self.request(
            "Finding nearby cities...",
            lambda api: api.find_cities_from_latlong(query),
        )

        def render(response):
            print_title(f"Cities near {query.location}")
            print_table(response.records, NEARBY_COLUMNS)

        return self.output(response, flags, render)

    def run_significant(self, flags: dict[str, Any], args: list[str]) -> bool:
        query = SignificantCitiesQuery(
            population=self.option(flags, "population"),
            location=self.option(flags, "location"),
            countrycode=self.option(flags, "country"),
            limit=self.option(flags, "limit"),
            sort=self.option(flags, "sort"),
            language=self.option(flags, "language"),
        )

        response = self.request(
            "Finding significant cities...",
            lambda api: api.get_significant_cities(query),
        )

        def render(response):
            print_title("Significant Cities")
            print_table(response.records, SIGNIFICANT_COLUMNS)

        return self.output(response, flags, render)
