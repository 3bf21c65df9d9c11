"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError, MalformedDataError
from .defaults import DefaultConfig, ExchangeParams, LoggingParams, get_default_config
from .validation import ConfigValidator

if TYPE_CHECKING:
    from ..data.models import Instrument

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _read_yaml(self, filename: str) -> dict[str, Any]:
        """Read a YAML document from the config directory, {} if absent."""
        path = self.config_dir / filename

        if not path.exists():
            return {}

        try:
            with open(path) as f:
                document = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                path=str(path)
            ) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping at the top level",
                path=str(path)
            )
        return document

    def load_exchange_overrides(self) -> dict[str, Any]:
        """Load file-level configuration overrides."""
        return self._read_yaml("exchange.yaml")

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. exchange.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_exchange_overrides())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Build a validated DefaultConfig from the merged configuration."""
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                "Invalid exchange configuration",
                path=str(self.config_dir / "exchange.yaml"),
                context={"errors": error_msgs}
            )

        return DefaultConfig(
            exchange=ExchangeParams(**merged.get("exchange", {})),
            logging=LoggingParams(**merged.get("logging", {})),
        )

    def load_exchange_params(self, overrides: Optional[dict[str, Any]] = None) -> ExchangeParams:
        """Load the validated exchange parameters."""
        return self.load_config(overrides).exchange

    def load_instrument_definitions(self) -> dict[str, dict[str, Any]]:
        """Load the instrument catalog definitions keyed by symbol."""
        instruments = self._read_yaml("instruments.yaml").get("instruments") or {}

        if not isinstance(instruments, dict):
            raise ConfigurationError(
                "'instruments' must be a mapping of symbol to definition",
                path=str(self.config_dir / "instruments.yaml")
            )

        return instruments

    def load_catalog(self) -> list["Instrument"]:
        """Load and validate the instrument catalog."""
        from ..data.models import Instrument

        catalog = []
        for symbol, definition in self.load_instrument_definitions().items():
            if not isinstance(definition, dict):
                raise MalformedDataError(
                    f"Instrument {symbol} definition must be a mapping",
                    raw_data=str(definition),
                    expected_format="mapping"
                )

            errors = ConfigValidator.validate_instrument(definition)
            if errors:
                error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
                raise MalformedDataError(
                    f"Instrument {symbol} definition is invalid",
                    raw_data=str(definition),
                    expected_format="kind, last_dividend, fixed_dividend_rate, par_value",
                    context={"symbol": symbol, "errors": error_msgs}
                )

            catalog.append(Instrument.from_dict(str(symbol), definition))

        logger.debug("Instrument catalog loaded", instrument_count=len(catalog))
        return catalog

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
