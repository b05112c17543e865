"""Tests for typed request parameters and enumerations."""

import pytest

from monvoyagepascher.core.enums import DistanceUnit, ElevationUnit, Language
from monvoyagepascher.core.errors import ValidationError
from monvoyagepascher.core.params import (
    DEFAULT_NEARBY_LOCATION,
    AirportSearch,
    CityProximitySearch,
    CityTextSearch,
    DistanceQuery,
    ElevationQuery,
    SunQuery,
    TimezoneQuery,
)


class TestEnums:
    """Test closed enumerations."""

    def test_parse_is_case_insensitive(self):
        assert Language.parse("FR") is Language.FR
        assert DistanceUnit.parse(" miles ") is DistanceUnit.MILES

    def test_parse_accepts_member(self):
        assert ElevationUnit.parse(ElevationUnit.FEET) is ElevationUnit.FEET

    def test_unknown_value_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Language.parse("it")
        assert "en, fr, de, es" in exc.value.message

    def test_label_from_class_name(self):
        assert ElevationUnit.label() == "elevation unit"


class TestCityTextSearch:
    """Test the minimum query length fast-fail."""

    def test_two_characters_rejected(self):
        with pytest.raises(ValidationError) as exc:
            CityTextSearch(query="Pa")
        assert "at least 3 characters" in exc.value.message

    def test_three_characters_accepted(self):
        assert CityTextSearch(query="Par").to_params()["query"] == "Par"

    def test_language_validated(self):
        with pytest.raises(ValidationError):
            CityTextSearch(query="Paris", language="xx")


class TestDefaults:
    """Test per-operation defaults."""

    def test_nearby_defaults_to_paris(self):
        assert CityProximitySearch().to_params()["location"] == DEFAULT_NEARBY_LOCATION

    def test_elevation_defaults_to_meters(self):
        assert ElevationQuery(locations="48.85,2.35").to_params()["unit"] == "meters"

    def test_distance_defaults_to_kms(self):
        assert DistanceQuery("JFK", "CDG").to_params()["unit"] == "kms"

    def test_distance_unit_rejected(self):
        with pytest.raises(ValidationError):
            DistanceQuery("JFK", "CDG", unit="furlongs")

    def test_top_airports_absent_when_false(self):
        assert AirportSearch().to_params()["top_airports"] is None
        assert AirportSearch(top_airports=True).to_params()["top_airports"] is True


class TestRequiredFields:
    """Test required fields and formats."""

    def test_timezone_requires_location(self):
        with pytest.raises(ValidationError):
            TimezoneQuery(location=" ")

    def test_sun_date_must_be_iso(self):
        with pytest.raises(ValidationError):
            SunQuery(location="CDG", date="16/10/2026")

    def test_sun_date_iso_accepted(self):
        assert SunQuery(location="CDG", date="2026-10-16").to_params()["date"] == "2026-10-16"
