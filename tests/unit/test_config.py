"""
Unit Tests for Configuration Module

These tests verify that the configuration system works correctly:
- Default values are applied when nothing is configured
- Segment base URLs and the testnet switch resolve correctly
- Validation catches invalid configurations

Run with:
    pytest tests/unit/test_config.py -v
"""

import pytest

from core.config import Settings, settings, validate_configuration


ENV_VARS = [
    "BINANCE_FUTURES_BASE_URL",
    "BINANCE_DELIVERY_BASE_URL",
    "BINANCE_TESTNET",
    "BINANCE_TESTNET_BASE_URL",
    "BINANCE_API_KEY",
    "BINANCE_KEY",
    "REQUEST_TIMEOUT",
    "MAX_RETRIES",
    "RETRY_DELAY",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Settings reads"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    """Test default values with an empty environment"""

    def test_default_base_urls(self, clean_env):
        config = Settings(_env_file=None)
        assert config.binance_futures_base_url == "https://fapi.binance.com"
        assert config.binance_delivery_base_url == "https://dapi.binance.com"
        assert config.binance_testnet is False

    def test_default_transport_options(self, clean_env):
        config = Settings(_env_file=None)
        assert config.request_timeout == 10
        assert config.max_retries == 3
        assert config.retry_delay == 1.5

    def test_default_api_key_is_empty(self, clean_env):
        assert Settings(_env_file=None).binance_api_key == ""

    def test_global_settings_instance(self):
        """Verify the module-level settings object is usable"""
        assert isinstance(settings, Settings)
        assert settings.log_level


class TestEnvironment:
    """Test values loaded from environment variables"""

    def test_api_key_from_binance_api_key(self, clean_env):
        clean_env.setenv("BINANCE_API_KEY", "key-1")
        assert Settings(_env_file=None).binance_api_key == "key-1"

    def test_api_key_from_binance_key(self, clean_env):
        """BINANCE_KEY is accepted as an alternative name"""
        clean_env.setenv("BINANCE_KEY", "key-2")
        assert Settings(_env_file=None).binance_api_key == "key-2"

    def test_testnet_flag_from_env(self, clean_env):
        clean_env.setenv("BINANCE_TESTNET", "true")
        assert Settings(_env_file=None).binance_testnet is True

    def test_env_names_are_case_insensitive(self, clean_env):
        clean_env.setenv("max_retries", "7")
        assert Settings(_env_file=None).max_retries == 7


class TestBaseUrlFor:
    """Test segment URL selection"""

    def test_futures_segment(self, clean_env):
        assert Settings(_env_file=None).base_url_for("futures") == "https://fapi.binance.com"

    def test_delivery_segment(self, clean_env):
        assert Settings(_env_file=None).base_url_for("delivery") == "https://dapi.binance.com"

    def test_testnet_overrides_both_segments(self, clean_env):
        config = Settings(_env_file=None, binance_testnet=True)
        assert config.base_url_for("futures") == "https://testnet.binancefuture.com"
        assert config.base_url_for("delivery") == "https://testnet.binancefuture.com"

    def test_trailing_slash_is_stripped(self, clean_env):
        config = Settings(_env_file=None, binance_futures_base_url="https://example.com/")
        assert config.base_url_for("futures") == "https://example.com"

    def test_unknown_segment_raises(self, clean_env):
        with pytest.raises(ValueError, match="Unknown market segment"):
            Settings(_env_file=None).base_url_for("spot")


class TestValidation:
    """Test validate_configuration"""

    def test_valid_configuration_passes(self, clean_env):
        validate_configuration(Settings(_env_file=None))

    def test_invalid_url_raises(self, clean_env):
        config = Settings(_env_file=None, binance_delivery_base_url="dapi.binance.com")
        with pytest.raises(ValueError, match="BINANCE_DELIVERY_BASE_URL"):
            validate_configuration(config)

    def test_non_positive_timeout_raises(self, clean_env):
        with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
            validate_configuration(Settings(_env_file=None, request_timeout=0))

    def test_zero_retries_raises(self, clean_env):
        with pytest.raises(ValueError, match="MAX_RETRIES"):
            validate_configuration(Settings(_env_file=None, max_retries=0))

    def test_negative_retry_delay_raises(self, clean_env):
        with pytest.raises(ValueError, match="RETRY_DELAY"):
            validate_configuration(Settings(_env_file=None, retry_delay=-1))

    def test_invalid_log_level_raises(self, clean_env):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            validate_configuration(Settings(_env_file=None, log_level="LOUD"))
