"""
Canonical data models for instruments and executed trades.

This module defines immutable data structures for the instrument catalog
and the trade ledger. No field validation happens at construction; bad
values are only filtered where a metric aggregates them.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Union

from ..metrics.dividend import calculate_dividend_yield, calculate_pe_ratio


class InstrumentKind(Enum):
    """Instrument kind selecting the dividend yield formula."""
    COMMON = "COMMON"
    PREFERRED = "PREFERRED"

    @classmethod
    def parse(cls, value: Union["InstrumentKind", str]) -> "InstrumentKind":
        """Parse a kind from an enum member or case-insensitive name."""
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


class TradeSide(Enum):
    """Side of an executed trade."""
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def parse(cls, value: Union["TradeSide", str, bool]) -> "TradeSide":
        """Parse a side from an enum member, a name, or a buy flag (True = BUY)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.BUY if value else cls.SELL
        return cls(str(value).upper())


@dataclass(frozen=True)
class Instrument:
    """Static valuation parameters for one tradable symbol."""
    symbol: str                         # Catalog key
    kind: InstrumentKind                # Selects dividend yield formula
    last_dividend: float                # Per share, used by COMMON yield and P/E
    fixed_dividend_rate: float = 0.0    # Fraction of par, PREFERRED only
    par_value: float = 0.0              # PREFERRED only

    @classmethod
    def from_dict(cls, symbol: str, definition: dict[str, Any]) -> "Instrument":
        """Build an instrument from a catalog definition mapping."""
        return cls(
            symbol=symbol,
            kind=InstrumentKind.parse(definition["kind"]),
            last_dividend=float(definition.get("last_dividend", 0.0)),
            fixed_dividend_rate=float(definition.get("fixed_dividend_rate", 0.0)),
            par_value=float(definition.get("par_value", 0.0)),
        )

    def dividend_yield(self, price: float) -> float:
        """Dividend yield at ``price``; the price is not guarded."""
        return calculate_dividend_yield(
            self.kind.value,
            price,
            last_dividend=self.last_dividend,
            fixed_dividend_rate=self.fixed_dividend_rate,
            par_value=self.par_value,
        )

    def pe_ratio(self, price: float) -> float:
        """P/E ratio at ``price``, 0.0 when the last dividend is 0."""
        return calculate_pe_ratio(price, self.last_dividend)


@dataclass(frozen=True)
class Trade:
    """Immutable record of one execution."""
    timestamp: datetime    # UTC execution time
    side: TradeSide
    quantity: int          # Shares
    price: float           # Per share, not validated

    @property
    def is_buy(self) -> bool:
        return self.side is TradeSide.BUY

    @property
    def traded_value(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class LedgerEntry:
    """Trade tagged with the symbol it was recorded under."""
    symbol: str
    trade: Trade
