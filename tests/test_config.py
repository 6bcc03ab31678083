"""
Test suite for configuration module
"""

from tafqeet.config import TafqeetConfig, get_config, reload_config


class TestTafqeetConfig:
    """Test environment-based configuration"""

    def test_defaults(self, monkeypatch):
        for key in ("DEFAULT_CURRENCY", "CLOSING_PHRASE", "PLACEHOLDER",
                    "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"TAFQEET_{key}", raising=False)

        config = TafqeetConfig()
        assert config.default_currency == "SAR"
        assert config.closing_phrase is False
        assert config.placeholder == "—"
        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_environment_overrides(self, tafqeet_env):
        config = tafqeet_env(default_currency="KWD", log_level="DEBUG",
                             closing_phrase="1")
        assert config.default_currency == "KWD"
        assert config.log_level == "DEBUG"
        assert config.closing_phrase is True

    def test_reload_replaces_global(self, tafqeet_env):
        before = get_config()
        after = tafqeet_env(placeholder="-")
        assert after is not before
        assert get_config() is after
        assert get_config().placeholder == "-"

    def test_reload_without_changes(self):
        assert reload_config() is get_config()
