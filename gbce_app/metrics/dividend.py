"""Dividend yield and P/E ratio calculations"""

import math


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE 754 semantics instead of raising ZeroDivisionError.

    x / 0 is +inf or -inf by the signs of both operands, 0 / 0 is nan.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def calculate_dividend_yield(
    kind: str,
    price: float,
    last_dividend: float,
    fixed_dividend_rate: float = 0.0,
    par_value: float = 0.0,
) -> float:
    """
    Calculate dividend yield

    COMMON:    last_dividend / price
    PREFERRED: (fixed_dividend_rate * par_value) / price

    Args:
        kind: "COMMON" or "PREFERRED"
        price: Price per share
        last_dividend: Last dividend per share
        fixed_dividend_rate: Fixed dividend as a fraction of par (preferred only)
        par_value: Par value (preferred only)

    Returns:
        Dividend yield; a non-positive price gives a degenerate value (inf, nan or negative)
    """
    if kind == "PREFERRED":
        return ieee_divide(fixed_dividend_rate * par_value, price)

    return ieee_divide(last_dividend, price)


def calculate_pe_ratio(price: float, last_dividend: float) -> float:
    """
    Calculate P/E ratio using the last dividend as the earnings proxy

    Returns:
        price / last_dividend, or 0.0 when last_dividend is 0
    """
    if last_dividend == 0:
        return 0.0

    return price / last_dividend
