"""Persistent key-value store for user settings (API key, default language)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from monvoyagepascher.core.errors import ConfigError

logger = logging.getLogger(__name__)

API_KEY = "apiKey"
LANGUAGE = "language"
KNOWN_KEYS = (API_KEY, LANGUAGE)


class ConfigStore:
    """JSON-file backed configuration.

    The file is read on every ``get`` so values written by another
    invocation are always seen. Values are stored as given; no validation
    happens here.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, str]:
        try:
            if not self.path.exists():
                return {}
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except ValueError as e:
            raise ConfigError(f"Cannot read {self.path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {self.path}: {e.strerror or e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Cannot read {self.path}: expected a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when unset."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Write a value, overwriting any previous one."""
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot write {self.path}: {e.strerror or e}") from e
        logger.debug("Stored %s in %s", key, self.path)

    def all(self) -> dict[str, str]:
        return dict(self._load())

    def is_configured(self) -> bool:
        return bool(self.get(API_KEY))

    @property
    def api_key(self) -> Optional[str]:
        return self.get(API_KEY)

    @property
    def language(self) -> Optional[str]:
        return self.get(LANGUAGE)
