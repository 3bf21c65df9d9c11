"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone

from gbce_app.exchange import Exchange


@pytest.fixture
def now() -> datetime:
    """Fixed market time for deterministic window evaluation."""
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(now):
    """Clock that always returns the fixed market time."""
    return lambda: now


@pytest.fixture
def exchange(frozen_clock) -> Exchange:
    """Empty exchange driven by the frozen clock."""
    return Exchange(clock=frozen_clock)


@pytest.fixture
def sample_exchange(exchange) -> Exchange:
    """Exchange loaded with the sample beverage catalog and POP trades."""
    exchange.register_instrument("TEA", "COMMON", 0, par_value=100)
    exchange.register_instrument("POP", "COMMON", 8, par_value=100)
    exchange.register_instrument("ALE", "COMMON", 23, par_value=60)
    exchange.register_instrument("GIN", "PREFERRED", 8, fixed_dividend_rate=0.02, par_value=100)
    exchange.register_instrument("JOE", "COMMON", 13, par_value=250)

    exchange.record_trade("POP", 100, "BUY", 110.0)
    exchange.record_trade("POP", 200, "SELL", 105.0)
    exchange.record_trade("POP", 50, "BUY", 115.0)
    return exchange
