"""
Transaction scheduler exception classes
"""
from typing import Optional


class SchedulerError(Exception):
    """Base exception for the transaction scheduler."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Args:
            message: Error message
            error_code: Machine readable error code (optional)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(SchedulerError):
    """Invalid configuration value."""

    def __init__(self, config_key: str, reason: str):
        """
        Args:
            config_key: Configuration key
            reason: Why the value was rejected
        """
        message = f"Configuration error ({config_key}): {reason}"
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key
        self.reason = reason
