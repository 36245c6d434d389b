"""Settings module"""
from .settings import DatabaseConfig, FeeConfig, LoggingConfig, validate_all

__all__ = ['DatabaseConfig', 'FeeConfig', 'LoggingConfig', 'validate_all']
