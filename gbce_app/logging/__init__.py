"""
Logging configuration and utilities for the GBCE exchange engine.
"""
from .config import configure_logging, get_exchange_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_exchange_logger"]
