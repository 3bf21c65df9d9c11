"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import ExchangeParams, LoggingParams

INSTRUMENT_KINDS = ("COMMON", "PREFERRED")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Sections of the merged configuration and the params class each one builds
CONFIG_SECTIONS = {
    "exchange": ExchangeParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_instrument(definition: dict[str, Any]) -> list[ValidationError]:
        """Validate a single instrument definition from the catalog file."""
        errors = []

        # Validate kind
        kind = definition.get("kind")
        if not isinstance(kind, str) or kind.upper() not in INSTRUMENT_KINDS:
            errors.append(ValidationError(
                field="kind",
                message=f"Must be one of {', '.join(INSTRUMENT_KINDS)}",
                value=kind
            ))

        # Validate last_dividend
        if "last_dividend" in definition:
            value = definition["last_dividend"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="last_dividend",
                    message="Must be a non-negative number",
                    value=value
                ))
        else:
            errors.append(ValidationError(
                field="last_dividend",
                message="Is required",
                value=None
            ))

        # Validate fixed_dividend_rate
        if "fixed_dividend_rate" in definition:
            value = definition["fixed_dividend_rate"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="fixed_dividend_rate",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        # Validate par_value
        if "par_value" in definition:
            value = definition["par_value"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="par_value",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_exchange_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate exchange parameters."""
        errors = []

        if "vwsp_window_minutes" in params:
            value = params["vwsp_window_minutes"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="vwsp_window_minutes",
                    message="Must be a positive integer",
                    value=value
                ))

        if "strict_prices" in params:
            value = params["strict_prices"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_prices",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params_class in CONFIG_SECTIONS.items():
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            # Unknown keys would not map onto the params dataclass
            known = {f.name for f in fields(params_class)}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown setting",
                        value=params[key]
                    ))

        exchange = config.get("exchange")
        if isinstance(exchange, dict):
            errors.extend(ConfigValidator.validate_exchange_params(exchange))

        logging_params = config.get("logging")
        if isinstance(logging_params, dict):
            errors.extend(ConfigValidator.validate_logging_params(logging_params))

        return errors
