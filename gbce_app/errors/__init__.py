"""
Error classification for the exchange valuation engine.

Metric queries absorb missing data into sentinel values; these exceptions
cover the opt-in strict price policy and configuration failures.
"""

from .data_quality import (
    DataQualityError,
    InvalidPriceError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidPriceError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
