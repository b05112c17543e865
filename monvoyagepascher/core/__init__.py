"""Core CLI components - settings, config store, API client and errors."""

from monvoyagepascher.core.api_client import APIResponse, GeoAPIClient
from monvoyagepascher.core.config import CLIConfig
from monvoyagepascher.core.errors import (
    ApiError,
    AuthenticationRequired,
    ConfigError,
    GeoAPIError,
    RequestFailed,
    ValidationError,
)
from monvoyagepascher.core.store import ConfigStore

__all__ = [
    "CLIConfig",
    "ConfigStore",
    "GeoAPIClient",
    "APIResponse",
    "GeoAPIError",
    "AuthenticationRequired",
    "ValidationError",
    "ApiError",
    "RequestFailed",
    "ConfigError",
]
