"""
Tests for ConfigManager defaults, validation and typed getters.
"""
import configparser

from config import (
    DEFAULT_CONFIG,
    FALLBACK_URL,
    PRIMARY_URL,
    PRIMARY_USER_AGENT,
    ConfigManager,
)


class TestConfigDefaults:

    def test_missing_file_is_created_with_defaults(self, tmp_path):
        path = tmp_path / "settings.ini"
        mgr = ConfigManager(str(path))

        assert path.exists()
        assert mgr.get("NETWORK", "PrimaryURL") == PRIMARY_URL
        assert mgr.get("NETWORK", "FallbackURL") == FALLBACK_URL
        assert mgr.get("NETWORK", "PrimaryUserAgent") == PRIMARY_USER_AGENT
        assert mgr.get_bool("NETWORK", "UseFallback") is True
        assert mgr.get_int("NETWORK", "MaxRetries") == 0

    def test_key_case_is_preserved_on_disk(self, tmp_path):
        path = tmp_path / "settings.ini"
        ConfigManager(str(path))

        assert "PrimaryURL" in path.read_text(encoding="utf-8")


class TestConfigValidation:

    def test_missing_keys_are_backfilled_and_saved(self, tmp_path):
        path = tmp_path / "settings.ini"
        path.write_text("[NETWORK]\nTimeout = 3\n", encoding="utf-8")

        mgr = ConfigManager(str(path))

        assert mgr.get_float("NETWORK", "Timeout") == 3.0
        assert mgr.get("NETWORK", "PrimaryURL") == PRIMARY_URL

        on_disk = configparser.ConfigParser(interpolation=None)
        on_disk.optionxform = str
        on_disk.read(path, encoding="utf-8")
        for section, options in DEFAULT_CONFIG.items():
            for key in options:
                assert on_disk.has_option(section, key)
        assert on_disk.get("NETWORK", "Timeout") == "3"

    def test_percent_signs_are_not_interpolated(self, tmp_path):
        path = tmp_path / "settings.ini"
        path.write_text(
            "[NETWORK]\nPrimaryURL = https://example.com/a%20b?q={query}\n",
            encoding="utf-8",
        )
        mgr = ConfigManager(str(path))

        assert mgr.get("NETWORK", "PrimaryURL") == "https://example.com/a%20b?q={query}"


class TestTypedGetters:

    def test_get_float_empty_returns_fallback(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / "settings.ini"))
        mgr.set("NETWORK", "Timeout", "")
        assert mgr.get_float("NETWORK", "Timeout", None) is None

    def test_get_float_garbage_returns_fallback(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / "settings.ini"))
        mgr.set("NETWORK", "Timeout", "soon")
        assert mgr.get_float("NETWORK", "Timeout", 5.0) == 5.0

    def test_get_int_garbage_returns_fallback(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / "settings.ini"))
        mgr.set("NETWORK", "MaxRetries", "many")
        assert mgr.get_int("NETWORK", "MaxRetries", 0) == 0

    def test_set_persists_between_instances(self, tmp_path):
        path = str(tmp_path / "settings.ini")
        ConfigManager(path).set("USER", "WindowX", 250)

        assert ConfigManager(path).get("USER", "WindowX") == "250"
