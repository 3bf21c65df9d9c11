"""
Data quality error classifications for instrument and trade data.

These exceptions describe bad input that a caller can correct and retry.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidPriceError(DataQualityError):
    """Non-positive price supplied to a price-based metric under the strict policy."""
    
    def __init__(self, message: str, price: Optional[float] = None, 
                 symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.price = price
        self.symbol = symbol


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""
    
    def __init__(self, message: str, raw_data: Optional[str] = None, 
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
