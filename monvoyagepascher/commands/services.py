"""Service commands - elevation, distance, sun positions, timezone."""

from __future__ import annotations

from typing import Any

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.api_client import APIResponse
from monvoyagepascher.core.enums import DistanceUnit, ElevationUnit
from monvoyagepascher.core.errors import ValidationError
from monvoyagepascher.core.params import DistanceQuery, ElevationQuery, SunQuery, TimezoneQuery
from monvoyagepascher.ui.console import console, print_title
from monvoyagepascher.ui.tables import Column, print_fields, print_table


def _single_record(response: APIResponse) -> dict[str, Any]:
    return response.data if isinstance(response.data, dict) else {}


class ElevationCommand(BaseCommand):
    """Elevation for one or more coordinates."""

    name = "elevation"
    description = "Get elevation for coordinates (pipe-separated)"
    usage = 'elevation "LAT,LONG|LAT,LONG" [--unit meters|feet] [--json]'
    options = ("unit", "json")
    max_positionals = 1

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise ValidationError('Missing locations. Usage: elevation "LAT,LONG|LAT,LONG"')

        query = ElevationQuery(
            locations=remaining[0],
            unit=self.option(flags, "unit") or ElevationUnit.METERS,
        )
        unit = query.unit.value

        response = self.request("Fetching elevation data...", lambda api: api.get_elevation(query))

        def render(response):
            print_title("Elevation")
            print_table(response.records, [
                Column("location", "Location"),
                Column("elevation", "Elevation"),
                Column("unit", "Unit", format=lambda value, record: value or unit),
            ])

        return self.output(response, flags, render)


class DistanceCommand(BaseCommand):
    """Distance between two coordinates or IATA codes."""

    name = "distance"
    description = "Calculate distance between two points (coords or IATA codes)"
    usage = "distance <locationA> <locationB> [--unit kms|miles] [--json]"
    options = ("unit", "json")
    max_positionals = 2

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if len(remaining) < 2:
            raise ValidationError("Two locations are required. Usage: distance <locationA> <locationB>")

        query = DistanceQuery(
            location_a=remaining[0],
            location_b=remaining[1],
            unit=self.option(flags, "unit") or DistanceUnit.KMS,
        )

        response = self.request("Calculating distance...", lambda api: api.get_distance(query))

        def render(response):
            distance = _single_record(response).get("distance")
            print_title("Distance")
            print_fields([
                ("From:", query.location_a),
                ("To:", query.location_b),
                ("Distance:", f"{distance} {query.unit.value}" if distance is not None else None),
            ], label_width=10)
            console.print()

        return self.output(response, flags, render)


class SunCommand(BaseCommand):
    """Sunrise, sunset and other solar events for a location."""

    name = "sun"
    description = "Get solar cycle data (sunrise, sunset, etc.) for a location"
    usage = "sun <location> [--date YYYY-MM-DD] [--json]"
    options = ("date", "json")
    max_positionals = 1

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise ValidationError("Missing location. Usage: sun <location>")

        query = SunQuery(location=remaining[0], date=self.option(flags, "date"))

        response = self.request("Fetching sun positions...", lambda api: api.get_sun_positions(query))

        def render(response):
            print_title(f"Sun Positions for {query.location}")
            print_fields(_single_record(response).items())
            console.print()

        return self.output(response, flags, render)


class TimezoneCommand(BaseCommand):
    """Timezone and current local time for a location."""

    name = "timezone"
    description = "Get timezone and current time for a location"
    usage = "timezone <location> [--json]"
    aliases = ["tz"]
    options = ("json",)
    max_positionals = 1

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining:
            raise ValidationError("Missing location. Usage: timezone <location>")

        query = TimezoneQuery(location=remaining[0])

        response = self.request("Fetching timezone...", lambda api: api.get_timezone(query))

        def render(response):
            data = _single_record(response)
            print_title(f"Timezone for {query.location}")
            print_fields([
                ("Timezone:", data.get("timezone")),
                ("Current time:", data.get("current_time")),
            ], label_width=15)
            console.print()

        return self.output(response, flags, render)
