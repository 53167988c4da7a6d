#!/usr/bin/env python3
"""OMI Validator - Main Entry Point.

Validates the OMI section of a build configuration before any image is
created or copied, and reports every problem found in one pass.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

from core.config import Configuration, ConfigurationError
from core.validator import ValidationResult, ValidationStatus
from omi.models import AccessConfig, OMIConfig, OMIConfigError
from omi.validator import OMIConfigValidator


def parse_arguments(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="OMI Configuration Validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Auto-detect omi.yaml
  %(prog)s build.yaml               # Use specific configuration file
  %(prog)s --region eu-west-2       # Override the build region
        """,
    )

    parser.add_argument(
        "config_file",
        nargs="?",
        help="Path to configuration file (default: auto-detect omi.yaml)",
    )

    parser.add_argument(
        "--region", help="Region the OMI is built in (overrides configuration file)"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show informational log messages"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="OMI Validator v1.0.0",
    )

    return parser.parse_args(argv)


def auto_detect_config() -> Optional[str]:
    """Auto-detect configuration file in current directory.

    Returns:
        Path to configuration file if found, None otherwise
    """
    if Path("omi.yaml").exists():
        return "omi.yaml"

    if Path("config/omi.yaml").exists():
        return "config/omi.yaml"

    return None


def display_result(result: ValidationResult) -> None:
    """Print a validation result with its errors and remediation steps."""
    status_symbol = {
        "PASSED": "✅",
        "FAILED": "❌",
    }.get(result.status.value, "❓")

    print(f"{status_symbol} {result.validator_name}: {result.message}")

    for error in result.errors or []:
        print(f"   • {error}")

    if result.remediation_steps:
        print("   Remediation steps:")
        for step in result.remediation_steps:
            print(f"   • {step}")

    if result.status == ValidationStatus.PASSED and result.details:
        regions = result.details.get("regions") or []
        print(f"   Copy regions: {', '.join(regions) if regions else '(none)'}")


def main(argv: Optional[list] = None) -> int:
    """Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        args = parse_arguments(argv)

        logging.basicConfig(
            level=logging.INFO if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        config_path = args.config_file or auto_detect_config()
        if not config_path:
            print("❌ No configuration file found.")
            print("   Please create omi.yaml or specify a configuration file.")
            print("   Use --help for more information.")
            return 1

        print(f"📄 Using configuration file: {config_path}")

        try:
            config = Configuration(config_path)
            omi_config = OMIConfig.from_dict(config.get_omi_section())
            access_config = AccessConfig.from_dict(config.get_access_section())
        except (ConfigurationError, OMIConfigError) as e:
            print(f"❌ Configuration error: {e}")
            return 1

        if args.region:
            access_config = AccessConfig(raw_region=args.region)

        validator = OMIConfigValidator(
            omi_config, access_config, config.get_known_regions()
        )
        result = validator.validate()
        display_result(result)

        return 0 if result.status == ValidationStatus.PASSED else 1

    except KeyboardInterrupt:
        print("\n\n👋 Operation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
