"""Pytest configuration and shared fixtures."""

import json

import httpx
import pytest

from monvoyagepascher.core.api_client import GeoAPIClient
from monvoyagepascher.core.config import CLIConfig
from monvoyagepascher.core.store import ConfigStore
from monvoyagepascher.main import build_registry

TEST_KEY = "test-key-1234567890"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers with a fixed envelope and keeps every request."""

    def __init__(self, body=None, status_code: int = 200):
        self.requests: list[httpx.Request] = []
        self.body = {"status": "success", "message": "ok", "data": []} if body is None else body
        self.status_code = status_code
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, content=json.dumps(self.body).encode())
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def config(tmp_path):
    return CLIConfig(config_dir=tmp_path / "config", base_url="https://api.example.test")


@pytest.fixture
def store(config):
    return ConfigStore(config.config_file)


@pytest.fixture
def configured_store(store):
    store.set("apiKey", TEST_KEY)
    return store


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_client(transport):
    """Build a client wired to the recording transport."""

    def _make(api_key=TEST_KEY, default_language=None):
        return GeoAPIClient(
            api_key=api_key,
            default_language=default_language,
            base_url="https://api.example.test",
            transport=transport,
        )

    return _make


@pytest.fixture
def registry(config, configured_store, transport):
    """Command registry using the mock transport and a configured store."""
    return build_registry(config, configured_store, transport)


@pytest.fixture
def sample_airports():
    return {
        "status": "success",
        "message": "2 airports found",
        "count": 2,
        "data": [
            {
                "iata_code": "CDG",
                "name": "Paris Charles de Gaulle Airport",
                "municipality": "Paris",
                "iso_country": "FR",
                "elevation_ft": 392,
            },
            {
                "iata_code": "ORY",
                "name": "Paris-Orly Airport",
                "municipality": "Paris",
                "iso_country": "FR",
                "elevation_ft": None,
            },
        ],
    }
