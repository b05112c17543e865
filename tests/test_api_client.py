"""Tests for the API client: request shaping and error normalization."""

import httpx
import pytest

from monvoyagepascher.core.api_client import APIResponse, GeoAPIClient, clean_params
from monvoyagepascher.core.errors import ApiError, AuthenticationRequired, RequestFailed
from monvoyagepascher.core.params import (
    AirportSearch,
    CityProximitySearch,
    CityTextSearch,
    ContinentQuery,
    CountryQuery,
    DistanceQuery,
    ElevationQuery,
    SignificantCitiesQuery,
    SunQuery,
    TimezoneQuery,
)

from tests.conftest import TEST_KEY, RecordingTransport


class TestAuthentication:
    """Test API key handling."""

    def test_missing_key_raises_before_any_request(self, transport, make_client):
        client = make_client(api_key=None)
        with pytest.raises(AuthenticationRequired):
            client.ping()
        assert transport.requests == []

    def test_key_sent_in_header(self, transport, make_client):
        make_client().ping()
        assert transport.last.headers["x-api-key"] == TEST_KEY

    def test_every_call_is_a_get(self, transport, make_client):
        client = make_client()
        client.get_countries()
        client.get_timezone(TimezoneQuery(location="CDG"))
        assert {request.method for request in transport.requests} == {"GET"}


class TestLanguagePrecedence:
    """Explicit value, then stored default, then English."""

    def test_explicit_beats_stored(self, transport, make_client):
        make_client(default_language="fr").get_countries(CountryQuery(language="de"))
        assert transport.last_params["language"] == "de"

    def test_stored_used_when_no_explicit(self, transport, make_client):
        make_client(default_language="fr").get_countries(CountryQuery())
        assert transport.last_params["language"] == "fr"

    def test_english_when_neither(self, transport, make_client):
        make_client().get_continents()
        assert transport.last_params["language"] == "en"

    @pytest.mark.parametrize("call", [
        lambda c: c.ping(),
        lambda c: c.get_elevation(ElevationQuery(locations="48.85,2.35")),
        lambda c: c.get_distance(DistanceQuery("JFK", "CDG")),
        lambda c: c.get_sun_positions(SunQuery(location="CDG")),
        lambda c: c.get_timezone(TimezoneQuery(location="CDG")),
    ])
    def test_services_take_no_language(self, transport, make_client, call):
        call(make_client(default_language="fr"))
        assert "language" not in transport.last_params


class TestParameters:
    """Test query string shaping."""

    def test_absent_options_are_omitted(self, transport, make_client):
        make_client().search_airports(AirportSearch(countrycode="FR"))
        assert transport.last_params == {"language": "en", "countrycode": "FR"}

    def test_empty_string_never_sent(self, transport, make_client):
        make_client().get_significant_cities(SignificantCitiesQuery(countrycode="", limit=10))
        assert "countrycode" not in transport.last_params
        assert transport.last_params["limit"] == "10"

    def test_top_airports_flag(self, transport, make_client):
        make_client().search_airports(AirportSearch(top_airports=True, radius=100))
        assert transport.last_params["top_airports"] == "true"
        assert transport.last_params["radius"] == "100"

    def test_distance_sends_exactly_three_params(self, transport, make_client):
        make_client().get_distance(DistanceQuery("JFK", "CDG", unit="miles"))
        assert transport.last.url.path == "/distance"
        assert transport.last_params == {"locationA": "JFK", "locationB": "CDG", "unit": "miles"}

    def test_nearby_default_location(self, transport, make_client):
        make_client().find_cities_from_latlong(CityProximitySearch())
        assert transport.last_params["location"] == "48.8566,2.3522"

    def test_text_search_endpoint(self, transport, make_client):
        make_client().find_cities_from_text(CityTextSearch(query="Lyon", countrycode="FR"))
        assert transport.last.url.path == "/cities/findcitiesfromtext"
        assert transport.last_params == {"language": "en", "query": "Lyon", "countrycode": "FR"}

    def test_continent_code(self, transport, make_client):
        make_client().get_continents(ContinentQuery(code="EU"))
        assert transport.last.url.path == "/continents"
        assert transport.last_params["code"] == "EU"

    def test_ping_endpoint_has_no_params(self, transport, make_client):
        make_client().ping()
        assert transport.last.url.path == "/pong"
        assert transport.last_params == {}

    def test_clean_params_keeps_zero(self):
        assert clean_params({"radius": 0, "x": None, "y": "", "z": False}) == {"radius": 0}


class TestResponses:
    """Test envelope normalization."""

    def test_success_envelope_returned_unchanged(self, make_client, transport, sample_airports):
        transport.body = sample_airports
        response = make_client().search_airports(AirportSearch())
        assert isinstance(response, APIResponse)
        assert response.raw == sample_airports
        assert response.count == 2
        assert response.message == "2 airports found"
        assert response.records[0]["iata_code"] == "CDG"

    def test_single_record_data(self, make_client, transport):
        transport.body = {"status": "success", "data": {"timezone": "Europe/Paris"}}
        response = make_client().get_timezone(TimezoneQuery(location="CDG"))
        assert response.records == [{"timezone": "Europe/Paris"}]

    def test_error_status_with_200(self, make_client, transport):
        transport.body = {"status": "error", "message": "rate limited"}
        with pytest.raises(ApiError) as exc:
            make_client().ping()
        assert exc.value.message == "rate limited"
        assert exc.value.status_code == 200

    def test_error_status_with_429(self, make_client, transport):
        transport.body = {"status": "error", "message": "rate limited"}
        transport.status_code = 429
        with pytest.raises(ApiError) as exc:
            make_client().ping()
        assert exc.value.message == "rate limited"

    def test_non_2xx_with_message(self, make_client, transport):
        transport.body = {"message": "Invalid API key"}
        transport.status_code = 403
        with pytest.raises(ApiError) as exc:
            make_client().ping()
        assert exc.value.message == "Invalid API key"
        assert exc.value.status_code == 403

    def test_error_without_message_is_generic(self, make_client, transport):
        transport.body = {"status": "error"}
        with pytest.raises(ApiError) as exc:
            make_client().ping()
        assert exc.value.message == "API error"

    def test_non_json_error_body(self, make_client, transport):
        transport.body = "<html>Bad Gateway</html>"
        transport.status_code = 502
        with pytest.raises(ApiError) as exc:
            make_client().ping()
        assert exc.value.status_code == 502

    def test_non_json_success_body(self, make_client, transport):
        transport.body = "pong"
        with pytest.raises(ApiError):
            make_client().ping()

    def test_transport_failure_becomes_request_failed(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = GeoAPIClient(api_key=TEST_KEY, transport=httpx.MockTransport(refuse))
        with pytest.raises(RequestFailed) as exc:
            client.ping()
        assert exc.value.message == "Connection refused"

    def test_timeout_becomes_request_failed(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = GeoAPIClient(api_key=TEST_KEY, transport=httpx.MockTransport(slow))
        with pytest.raises(RequestFailed):
            client.ping()


class TestLifecycle:
    """Test client setup and teardown."""

    def test_base_url_trailing_slash(self):
        transport = RecordingTransport()
        client = GeoAPIClient(api_key=TEST_KEY, base_url="https://api.example.test/", transport=transport)
        client.ping()
        assert transport.last.url.host == "api.example.test"
        assert transport.last.url.path == "/pong"

    def test_context_manager_closes(self, make_client):
        with make_client() as client:
            client.ping()
            assert client._client is not None
        assert client._client is None
