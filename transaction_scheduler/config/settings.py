"""
Transaction scheduler settings
Environment variables take precedence, values are validated on load
"""
import logging
import os
from typing import Optional
from dotenv import load_dotenv
from transaction_scheduler.exceptions import ConfigurationError

load_dotenv()


def get_env_int(key: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    """Read an integer from the environment (with validation)"""
    value = os.getenv(key)
    if value is None:
        return default

    try:
        int_value = int(value)
    except ValueError:
        raise ConfigurationError(key, f"cannot convert to integer: {value}")
    if min_value is not None and int_value < min_value:
        raise ConfigurationError(key, f"value is below the minimum ({min_value}): {int_value}")
    if max_value is not None and int_value > max_value:
        raise ConfigurationError(key, f"value is above the maximum ({max_value}): {int_value}")
    return int_value


def get_env_bool(key: str, default: bool) -> bool:
    """Read a boolean flag from the environment"""
    value = os.getenv(key)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(key, f"cannot convert to boolean: {value}")


def get_env_str(key: str, default: str) -> str:
    """Read a string from the environment"""
    return os.getenv(key, default)


class DatabaseConfig:
    """Database settings"""
    URL = get_env_str("SCHEDULER_DATABASE_URL", "sqlite:///./transaction_scheduler.db")
    ECHO = get_env_bool("SCHEDULER_DATABASE_ECHO", False)
    POOL_RECYCLE = get_env_int("SCHEDULER_DATABASE_POOL_RECYCLE", 3600, min_value=-1)

    @classmethod
    def validate(cls):
        """Validate database settings"""
        if not cls.URL or not cls.URL.strip():
            raise ConfigurationError("DATABASE_URL", "database URL must not be empty")


class FeeConfig:
    """Fee rule table settings"""
    SEED_DEFAULTS = get_env_bool("SCHEDULER_SEED_DEFAULT_FEES", True)


class LoggingConfig:
    """Logging settings"""
    LEVEL = get_env_str("SCHEDULER_LOG_LEVEL", "INFO").upper()
    FILE = os.getenv("SCHEDULER_LOG_FILE")

    @classmethod
    def validate(cls):
        """Validate logging settings"""
        if not isinstance(logging.getLevelName(cls.LEVEL), int):
            raise ConfigurationError("LOG_LEVEL", f"unknown log level: {cls.LEVEL}")


def validate_all() -> None:
    """Validate every settings group"""
    DatabaseConfig.validate()
    LoggingConfig.validate()
