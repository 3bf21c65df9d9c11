"""Data models for metrics reports"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..utils.time import format_market_time


@dataclass(frozen=True)
class MetricsSnapshot:
    """All per-instrument metrics for one symbol at a given price and instant"""
    symbol: str
    timestamp: datetime
    price: float
    dividend_yield: float = 0.0
    pe_ratio: float = 0.0
    vwsp: float = 0.0
    trade_count: int = 0      # Trades inside the window that took part in the VWSP
    registered: bool = False

    def has_trades(self) -> bool:
        """Check if any trade contributed to the VWSP"""
        return self.trade_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reporting"""
        return {
            "symbol": self.symbol,
            "timestamp": format_market_time(self.timestamp),
            "price": self.price,
            "dividend_yield": self.dividend_yield,
            "pe_ratio": self.pe_ratio,
            "vwsp": self.vwsp,
            "trade_count": self.trade_count,
            "registered": self.registered,
        }
