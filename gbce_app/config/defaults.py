"""Default configuration parameters for the exchange valuation engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExchangeParams:
    """Exchange metric parameters."""
    vwsp_window_minutes: int = 10        # Trailing window for volume weighted price
    strict_prices: bool = False          # Raise on non-positive prices instead of degenerate results


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    exchange: ExchangeParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        exchange=ExchangeParams(),
        logging=LoggingParams(),
    )
