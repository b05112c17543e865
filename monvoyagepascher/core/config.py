"""CLI runtime settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.mon-voyage-pas-cher.com"


class CLIConfig(BaseSettings):
    """Runtime settings for the CLI, overridable from the environment.

    Persisted user settings (API key, default language) live in
    ``ConfigStore``; this object only says where to find them and how to
    reach the API.
    """

    model_config = SettingsConfigDict(env_prefix="MONVOYAGEPASCHER_")

    # API settings
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    # Where config.json and the shell history are kept
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".monvoyagepascher")

    # UI settings
    verbose: bool = False

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.json"

    @property
    def history_file(self) -> Path:
        return self.config_dir / "history"
