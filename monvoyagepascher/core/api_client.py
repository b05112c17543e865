"""API Client for the mon-voyage-pas-cher.com travel geography API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from monvoyagepascher.core.config import DEFAULT_BASE_URL
from monvoyagepascher.core.enums import DEFAULT_LANGUAGE, Language, Status
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

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    """The uniform envelope returned by every endpoint."""
    status: str
    message: str = ""
    count: Optional[int] = None
    data: Any = None
    raw: dict[str, Any] = field(default_factory=dict)
    status_code: int = 0

    @classmethod
    def from_envelope(cls, body: dict[str, Any], status_code: int) -> "APIResponse":
        return cls(
            status=body.get("status", Status.SUCCESS.value),
            message=body.get("message") or "",
            count=body.get("count"),
            data=body.get("data"),
            raw=body,
            status_code=status_code,
        )

    @property
    def records(self) -> list[dict[str, Any]]:
        """``data`` as a list, whether the endpoint returned one record or many."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return self.data
        return [self.data]


def clean_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop absent values; an omitted option is never sent as an empty string."""
    return {
        key: value
        for key, value in params.items()
        if value is not None and value is not False and value != ""
    }


class GeoAPIClient:
    """HTTP client for the travel geography API.

    All operations are read-only GETs. The client never retries; every
    failure surfaces as a ``GeoAPIError`` subclass.
    """

    # Default timeout for a single request
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_key: Optional[str],
        default_language: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.default_language = default_language
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GeoAPIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def resolve_language(self, explicit: Optional[Language] = None) -> str:
        """Explicit value, then the stored default, then English."""
        if explicit is not None:
            return Language.parse(explicit).value
        if self.default_language:
            # Stored values are passed through as written by `config set`
            return self.default_language
        return DEFAULT_LANGUAGE.value

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise AuthenticationRequired()
        return {"x-api-key": self.api_key}

    def _request(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> APIResponse:
        """Make a GET request to the API and normalize the envelope.

        Args:
            endpoint: API endpoint path
            params: Query parameters; absent values are dropped

        Raises:
            AuthenticationRequired: no API key, nothing is sent
            RequestFailed: no response was received
            ApiError: the API reported an error
        """
        headers = self._headers()
        query = clean_params(params or {})
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, query)

        try:
            response = self.client.get(url, headers=headers, params=query)
        except httpx.RequestError as e:
            logger.debug("Request to %s failed: %r", url, e)
            raise RequestFailed(str(e) or type(e).__name__) from e

        logger.debug("%s responded HTTP %s", endpoint, response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            if response.is_success:
                raise ApiError("Invalid response from API", response.status_code)
            raise ApiError("API error", response.status_code)

        if body.get("status") == Status.ERROR.value or not response.is_success:
            raise ApiError(body.get("message") or "API error", response.status_code)

        return APIResponse.from_envelope(body, response.status_code)

    def _geo_request(self, endpoint: str, query) -> APIResponse:
        params = {"language": self.resolve_language(query.language)}
        params.update(query.to_params())
        return self._request(endpoint, params)

    # Geography
    def search_airports(self, query: AirportSearch) -> APIResponse:
        """Search airports by coordinates, radius or country."""
        return self._geo_request("/airports", query)

    def find_cities_from_text(self, query: CityTextSearch) -> APIResponse:
        """Autocomplete-style city search."""
        return self._geo_request("/cities/findcitiesfromtext", query)

    def find_cities_from_latlong(self, query: CityProximitySearch) -> APIResponse:
        """Cities around a coordinate."""
        return self._geo_request("/cities/findcitiesfromlatlong", query)

    def get_significant_cities(self, query: SignificantCitiesQuery) -> APIResponse:
        """Cities above a population share of their country."""
        return self._geo_request("/cities/significant", query)

    def get_continents(self, query: Optional[ContinentQuery] = None) -> APIResponse:
        return self._geo_request("/continents", query or ContinentQuery())

    def get_countries(self, query: Optional[CountryQuery] = None) -> APIResponse:
        return self._geo_request("/countries", query or CountryQuery())

    # Services
    def get_elevation(self, query: ElevationQuery) -> APIResponse:
        return self._request("/elevation", query.to_params())

    def get_distance(self, query: DistanceQuery) -> APIResponse:
        return self._request("/distance", query.to_params())

    def get_sun_positions(self, query: SunQuery) -> APIResponse:
        return self._request("/sun_positions", query.to_params())

    def get_timezone(self, query: TimezoneQuery) -> APIResponse:
        return self._request("/timezone", query.to_params())

    # Health
    def ping(self) -> APIResponse:
        """Check API connectivity."""
        return self._request("/pong")
