"""Configuration management with defaults, YAML overrides and validation."""

from .defaults import DefaultConfig, ExchangeParams, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ExchangeParams",
    "LoggingParams",
    "ValidationError",
    "get_default_config",
]
