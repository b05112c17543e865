"""Typed request parameters, one dataclass per API operation.

``None`` means "option not supplied"; the API client drops those before
building the query string so absence never turns into an empty value.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any, Optional, Union

from monvoyagepascher.core.enums import DistanceUnit, ElevationUnit, Language
from monvoyagepascher.core.errors import ValidationError

Number = Union[int, float, str]

DEFAULT_NEARBY_LOCATION = "48.8566,2.3522"  # Paris
MIN_QUERY_LENGTH = 3


def _language(value: Optional[str]) -> Optional[Language]:
    return Language.parse(value) if value is not None else None


def _required(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return value


@dataclass
class AirportSearch:
    location: Optional[str] = None
    radius: Optional[Number] = None
    countrycode: Optional[str] = None
    top_airports: bool = False
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)

    def to_params(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "radius": self.radius,
            "countrycode": self.countrycode,
            "top_airports": True if self.top_airports else None,
        }


@dataclass
class CityTextSearch:
    query: str
    countrycode: Optional[str] = None
    sort: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)
        if self.query is None or len(self.query) < MIN_QUERY_LENGTH:
            raise ValidationError(f"Query must be at least {MIN_QUERY_LENGTH} characters")

    def to_params(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "countrycode": self.countrycode,
            "sort": self.sort,
        }


@dataclass
class CityProximitySearch:
    location: str = DEFAULT_NEARBY_LOCATION
    radius: Optional[Number] = None
    countrycode: Optional[str] = None
    limit: Optional[Number] = None
    sort: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)

    def to_params(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "radius": self.radius,
            "countrycode": self.countrycode,
            "limit": self.limit,
            "sort": self.sort,
        }


@dataclass
class SignificantCitiesQuery:
    population: Optional[Number] = None
    location: Optional[str] = None
    countrycode: Optional[str] = None
    limit: Optional[Number] = None
    sort: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)

    def to_params(self) -> dict[str, Any]:
        return {
            "population": self.population,
            "location": self.location,
            "countrycode": self.countrycode,
            "limit": self.limit,
            "sort": self.sort,
        }


@dataclass
class ContinentQuery:
    code: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)

    def to_params(self) -> dict[str, Any]:
        return {"code": self.code}


@dataclass
class CountryQuery:
    countrycode: Optional[str] = None
    language: Optional[Language] = None

    def __post_init__(self):
        self.language = _language(self.language)

    def to_params(self) -> dict[str, Any]:
        return {"countrycode": self.countrycode}


@dataclass
class ElevationQuery:
    """Pipe-separated ``lat,long`` entries, e.g. ``"48.85,2.35|45.76,4.83"``."""

    locations: str
    unit: ElevationUnit = ElevationUnit.METERS

    def __post_init__(self):
        _required(self.locations, "locations")
        self.unit = ElevationUnit.parse(self.unit)

    def to_params(self) -> dict[str, Any]:
        return {"locations": self.locations, "unit": self.unit.value}


@dataclass
class DistanceQuery:
    """Each end is either ``lat,long`` or an IATA airport code."""

    location_a: str
    location_b: str
    unit: DistanceUnit = DistanceUnit.KMS

    def __post_init__(self):
        _required(self.location_a, "locationA")
        _required(self.location_b, "locationB")
        self.unit = DistanceUnit.parse(self.unit)

    def to_params(self) -> dict[str, Any]:
        return {
            "locationA": self.location_a,
            "locationB": self.location_b,
            "unit": self.unit.value,
        }


@dataclass
class SunQuery:
    location: str
    date: Optional[str] = None  # YYYY-MM-DD

    def __post_init__(self):
        _required(self.location, "location")
        if self.date is not None:
            try:
                datetime.date.fromisoformat(self.date)
            except ValueError as e:
                raise ValidationError(f"Invalid date '{self.date}' (expected YYYY-MM-DD)") from e

    def to_params(self) -> dict[str, Any]:
        return {"location": self.location, "date": self.date}


@dataclass
class TimezoneQuery:
    location: str

    def __post_init__(self):
        _required(self.location, "location")

    def to_params(self) -> dict[str, Any]:
        return {"location": self.location}
