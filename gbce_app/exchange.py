"""
Exchange coordinator.

Owns the instrument catalog and the append-only trade ledger, and answers
every derived-metric query: dividend yield, P/E ratio, volume weighted
stock price and the GBCE All Share Index.
"""

import threading
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Optional, Union

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import Instrument, InstrumentKind, LedgerEntry, Trade, TradeSide
from .errors import InvalidPriceError
from .logging.config import get_exchange_logger, log_metric_result
from .metrics.index import calculate_geometric_mean
from .metrics.vwsp import VWSPResult, calculate_vwsp
from .models.metrics import MetricsSnapshot
from .utils.time import ensure_utc, get_market_time, window_start

exchange_logger = get_exchange_logger(__name__)

Clock = Callable[[], datetime]


class Exchange:
    """
    Instrument catalog plus trade ledger with metric queries.

    Metric queries for a symbol that is not in the catalog return 0.0
    instead of raising. ``register`` and ``record_trade`` are the only
    mutators; all of them and every full scan run under one lock.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        clock: Optional[Clock] = None,
        strict_prices: Optional[bool] = None,
    ) -> None:
        """Initialize an empty exchange."""
        self.config = config or get_default_config()
        self.clock: Clock = clock or get_market_time
        self.strict_prices = (
            self.config.exchange.strict_prices if strict_prices is None else strict_prices
        )
        self.window = timedelta(minutes=self.config.exchange.vwsp_window_minutes)
        self.logger = exchange_logger

        self._catalog: dict[str, Instrument] = {}
        self._ledger: list[LedgerEntry] = []
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls,
        loader: Optional[ConfigLoader] = None,
        clock: Optional[Clock] = None,
    ) -> "Exchange":
        """Create an exchange from configuration files and register its catalog."""
        loader = loader or ConfigLoader.create()
        exchange = cls(config=loader.load_config(), clock=clock)

        for instrument in loader.load_catalog():
            exchange.register(instrument)

        return exchange

    def __len__(self) -> int:
        with self._lock:
            return len(self._catalog)

    def __contains__(self, symbol: object) -> bool:
        with self._lock:
            return symbol in self._catalog

    # Catalog

    def register(self, instrument: Instrument) -> None:
        """Insert or replace the instrument under its symbol."""
        with self._lock:
            replaced = instrument.symbol in self._catalog
            self._catalog[instrument.symbol] = instrument

        self.logger.info(
            "Instrument registered",
            symbol=instrument.symbol,
            kind=instrument.kind.value,
            replaced=replaced
        )

    def register_instrument(
        self,
        symbol: str,
        kind: Union[InstrumentKind, str],
        last_dividend: float,
        fixed_dividend_rate: float = 0.0,
        par_value: float = 0.0,
    ) -> Instrument:
        """Build and register an instrument from its valuation parameters."""
        instrument = Instrument(
            symbol=symbol,
            kind=InstrumentKind.parse(kind),
            last_dividend=last_dividend,
            fixed_dividend_rate=fixed_dividend_rate,
            par_value=par_value,
        )
        self.register(instrument)
        return instrument

    def lookup(self, symbol: str) -> Optional[Instrument]:
        """Return the registered instrument, None if absent."""
        with self._lock:
            return self._catalog.get(symbol)

    def symbols(self) -> list[str]:
        """Return the registered symbols."""
        with self._lock:
            return list(self._catalog)

    # Ledger

    def record_trade(
        self,
        symbol: str,
        quantity: int,
        side: Union[TradeSide, str, bool],
        price: float,
        timestamp: Optional[datetime] = None,
    ) -> Trade:
        """
        Append a trade to the ledger under ``symbol``.

        Nothing is validated: unregistered symbols and non-positive prices
        are accepted and only filtered out later by the VWSP.
        """
        trade = Trade(
            timestamp=ensure_utc(timestamp) if timestamp is not None else self.clock(),
            side=TradeSide.parse(side),
            quantity=quantity,
            price=price,
        )

        with self._lock:
            self._ledger.append(LedgerEntry(symbol=symbol, trade=trade))
            registered = symbol in self._catalog

        if not registered:
            self.logger.warning("Trade recorded for unregistered symbol", symbol=symbol)
        if price <= 0:
            self.logger.warning("Trade recorded with non-positive price", symbol=symbol, price=price)

        self.logger.debug(
            "Trade recorded",
            symbol=symbol,
            side=trade.side.value,
            quantity=quantity,
            price=price,
            timestamp=trade.timestamp.isoformat()
        )
        return trade

    def trades(self, symbol: Optional[str] = None) -> list[Trade]:
        """Return a snapshot of recorded trades in insertion order."""
        with self._lock:
            entries = list(self._ledger)

        return [entry.trade for entry in entries if symbol is None or entry.symbol == symbol]

    # Metrics

    def _check_price(self, symbol: str, price: float) -> None:
        if self.strict_prices and price <= 0:
            raise InvalidPriceError(
                f"Price must be positive, got {price}",
                price=price,
                symbol=symbol
            )

    def dividend_yield(self, symbol: str, price: float) -> float:
        """Dividend yield of ``symbol`` at ``price``, 0.0 for unknown symbols."""
        instrument = self.lookup(symbol)
        if instrument is None:
            self.logger.debug("Unknown symbol, returning sentinel", symbol=symbol, metric="dividend_yield")
            return 0.0

        self._check_price(symbol, price)
        return instrument.dividend_yield(price)

    def pe_ratio(self, symbol: str, price: float) -> float:
        """P/E ratio of ``symbol`` at ``price``, 0.0 for unknown symbols."""
        instrument = self.lookup(symbol)
        if instrument is None:
            self.logger.debug("Unknown symbol, returning sentinel", symbol=symbol, metric="pe_ratio")
            return 0.0

        self._check_price(symbol, price)
        return instrument.pe_ratio(price)

    def _vwsp(self, symbol: str, now: Optional[datetime], window: Optional[timedelta]) -> VWSPResult:
        now = now if now is not None else self.clock()
        since = window_start(now, window if window is not None else self.window)

        with self._lock:
            entries = list(self._ledger)

        return calculate_vwsp(entries, symbol, since)

    def volume_weighted_price(
        self,
        symbol: str,
        now: Optional[datetime] = None,
        window: Optional[timedelta] = None,
    ) -> float:
        """
        Volume weighted stock price of ``symbol`` over the trailing window.

        Args:
            symbol: Instrument symbol
            now: End of the window, defaults to the exchange clock
            window: Window length, defaults to the configured VWSP window

        Returns:
            VWSP, or 0.0 when no trade with a positive price falls in the window
        """
        return self._vwsp(symbol, now, window).value

    def all_share_index(self, now: Optional[datetime] = None) -> float:
        """
        GBCE All Share Index: geometric mean of the positive VWSPs.

        Instruments without a qualifying trade do not participate. Every
        VWSP is taken from one catalog and ledger snapshot.

        Returns:
            Index value, or 0.0 when no instrument participates
        """
        now = now if now is not None else self.clock()
        since = window_start(now, self.window)

        with self._lock:
            symbols = list(self._catalog)
            entries = list(self._ledger)

        prices = [calculate_vwsp(entries, symbol, since).value for symbol in symbols]

        value, participants = calculate_geometric_mean(prices)

        self.logger.debug("All share index computed", participants=participants, value=value)
        return value

    def snapshot(self, symbol: str, price: float, now: Optional[datetime] = None) -> MetricsSnapshot:
        """Collect every per-instrument metric for ``symbol`` from one consistent read."""
        now = now if now is not None else self.clock()

        with self._lock:
            instrument = self._catalog.get(symbol)
            entries = list(self._ledger)

        vwsp = calculate_vwsp(entries, symbol, window_start(now, self.window))

        dividend_yield = 0.0
        pe_ratio = 0.0
        if instrument is not None:
            self._check_price(symbol, price)
            dividend_yield = instrument.dividend_yield(price)
            pe_ratio = instrument.pe_ratio(price)

        snapshot = MetricsSnapshot(
            symbol=symbol,
            timestamp=now,
            price=price,
            dividend_yield=dividend_yield,
            pe_ratio=pe_ratio,
            vwsp=vwsp.value,
            trade_count=vwsp.trade_count,
            registered=instrument is not None,
        )

        log_metric_result(
            self.logger,
            "snapshot",
            symbol,
            snapshot.vwsp,
            context={"trade_count": snapshot.trade_count}
        )
        return snapshot
