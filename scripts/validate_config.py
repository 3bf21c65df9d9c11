#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gbce_app.config.loader import ConfigLoader
from gbce_app.config.validation import ConfigValidator, ValidationError
from gbce_app.errors import ConfigurationError


def validate_instrument_definitions(loader: ConfigLoader) -> dict[str, List[ValidationError]]:
    """Validate every instrument definition, keyed by symbol."""
    results = {}
    for symbol, definition in loader.load_instrument_definitions().items():
        if not isinstance(definition, dict):
            results[symbol] = [ValidationError(field="definition", message="Must be a mapping", value=definition)]
        else:
            results[symbol] = ConfigValidator.validate_instrument(definition)
    return results


def main():
    """Main validation function."""
    print("🔍 Validating GBCE exchange configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    print(f"\n⚙️  Validating exchange settings...")
    try:
        errors = ConfigValidator.validate_config(loader.merge_config())

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ Exchange settings are valid")

    except ConfigurationError as e:
        print(f"❌ Error reading {e.path}: {e}")
        all_valid = False

    try:
        results = validate_instrument_definitions(loader)
    except ConfigurationError as e:
        print(f"❌ Error reading {e.path}: {e}")
        results = {}
        all_valid = False

    for symbol, errors in results.items():
        print(f"\n📊 Validating {symbol}...")

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} definition is valid")

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
