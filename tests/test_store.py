"""Tests for the persistent configuration store."""

import pytest

from monvoyagepascher.core.errors import ConfigError
from monvoyagepascher.core.store import ConfigStore


class TestConfigStore:
    """Test get/set/is_configured on the JSON store."""

    def test_missing_file_reads_as_empty(self, store):
        """Unset keys are absent, not an error."""
        assert store.get("apiKey") is None
        assert store.get("language") is None
        assert store.all() == {}

    def test_language_round_trip(self, store):
        """A value reads back exactly as written."""
        store.set("language", "es")
        assert store.get("language") == "es"

    def test_values_persist_across_instances(self, store):
        """A new store on the same file sees earlier writes."""
        store.set("apiKey", "secret-key")
        assert ConfigStore(store.path).get("apiKey") == "secret-key"

    def test_set_overwrites(self, store):
        store.set("language", "fr")
        store.set("language", "de")
        assert store.language == "de"

    def test_set_keeps_other_keys(self, store):
        store.set("apiKey", "abc")
        store.set("language", "fr")
        assert store.all() == {"apiKey": "abc", "language": "fr"}

    def test_set_creates_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "config.json"
        ConfigStore(path).set("language", "en")
        assert path.exists()

    def test_is_configured_requires_api_key(self, store):
        assert not store.is_configured()
        store.set("language", "fr")
        assert not store.is_configured()
        store.set("apiKey", "abc")
        assert store.is_configured()

    def test_empty_api_key_is_not_configured(self, store):
        store.set("apiKey", "")
        assert not store.is_configured()

    def test_no_validation_on_write(self, store):
        """The store keeps whatever it is given."""
        store.set("language", "klingon")
        assert store.language == "klingon"

    def test_corrupt_file_raises_config_error(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            store.get("apiKey")

    def test_non_object_file_raises_config_error(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            store.all()

    def test_directory_in_place_of_file_raises_config_error(self, tmp_path):
        path = tmp_path / "config.json"
        path.mkdir()
        with pytest.raises(ConfigError, match="Cannot read"):
            ConfigStore(path).get("apiKey")

    def test_invalid_utf8_raises_config_error(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_bytes(b'{"apiKey": "\xff"}')
        with pytest.raises(ConfigError):
            store.get("apiKey")

    def test_unwritable_parent_raises_config_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ConfigStore(blocker / "sub" / "config.json")
        with pytest.raises(ConfigError, match="Cannot write"):
            store.set("apiKey", "abc")
        assert blocker.read_text(encoding="utf-8") == ""
