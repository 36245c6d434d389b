"""
Settings tests
"""
import pytest

from transaction_scheduler.config.settings import (
    DatabaseConfig,
    FeeConfig,
    LoggingConfig,
    get_env_bool,
    get_env_int,
    get_env_str,
    validate_all,
)
from transaction_scheduler.exceptions import ConfigurationError


class TestEnvGetters:
    """Typed environment getters"""

    def test_int_default(self, monkeypatch):
        monkeypatch.delenv("SCHEDULER_TEST_INT", raising=False)
        assert get_env_int("SCHEDULER_TEST_INT", 7) == 7

    def test_int_value(self, monkeypatch):
        monkeypatch.setenv("SCHEDULER_TEST_INT", "42")
        assert get_env_int("SCHEDULER_TEST_INT", 7) == 42

    def test_int_invalid(self, monkeypatch):
        monkeypatch.setenv("SCHEDULER_TEST_INT", "forty")
        with pytest.raises(ConfigurationError) as exc_info:
            get_env_int("SCHEDULER_TEST_INT", 7)
        assert exc_info.value.config_key == "SCHEDULER_TEST_INT"
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

    def test_int_bounds(self, monkeypatch):
        monkeypatch.setenv("SCHEDULER_TEST_INT", "0")
        with pytest.raises(ConfigurationError, match="minimum"):
            get_env_int("SCHEDULER_TEST_INT", 7, min_value=1)
        monkeypatch.setenv("SCHEDULER_TEST_INT", "11")
        with pytest.raises(ConfigurationError, match="maximum"):
            get_env_int("SCHEDULER_TEST_INT", 7, max_value=10)

    @pytest.mark.parametrize("raw, expected", [
        ("1", True), ("true", True), ("YES", True), (" on ", True),
        ("0", False), ("False", False), ("no", False), ("off", False),
    ])
    def test_bool_values(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SCHEDULER_TEST_BOOL", raw)
        assert get_env_bool("SCHEDULER_TEST_BOOL", not expected) is expected

    def test_bool_invalid(self, monkeypatch):
        monkeypatch.setenv("SCHEDULER_TEST_BOOL", "maybe")
        with pytest.raises(ConfigurationError):
            get_env_bool("SCHEDULER_TEST_BOOL", True)

    def test_str_default(self, monkeypatch):
        monkeypatch.delenv("SCHEDULER_TEST_STR", raising=False)
        assert get_env_str("SCHEDULER_TEST_STR", "fallback") == "fallback"


class TestConfigClasses:
    """Settings groups"""

    def test_defaults_are_valid(self):
        validate_all()
        assert isinstance(FeeConfig.SEED_DEFAULTS, bool)
        assert LoggingConfig.LEVEL == LoggingConfig.LEVEL.upper()

    def test_empty_database_url(self, monkeypatch):
        monkeypatch.setattr(DatabaseConfig, "URL", "  ")
        with pytest.raises(ConfigurationError):
            DatabaseConfig.validate()

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setattr(LoggingConfig, "LEVEL", "CHATTY")
        with pytest.raises(ConfigurationError, match="CHATTY"):
            LoggingConfig.validate()
