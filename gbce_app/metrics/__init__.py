"""Metrics calculation engine for instrument valuation"""

from .dividend import calculate_dividend_yield, calculate_pe_ratio, ieee_divide
from .index import calculate_geometric_mean
from .vwsp import VWSPResult, calculate_vwsp

__all__ = [
    "VWSPResult",
    "calculate_dividend_yield",
    "calculate_geometric_mean",
    "calculate_pe_ratio",
    "calculate_vwsp",
    "ieee_divide",
]
