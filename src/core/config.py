"""Configuration management for OMI build validation.

This module handles YAML configuration loading, structural checks, and
environment variable override support for the OMI section, the access
context, and the list of known regions.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml


TRUTHY_VALUES = ("1", "true", "yes", "on")


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


class Configuration:
    """Configuration management with YAML loading and validation.

    This class handles loading configuration from YAML files,
    checking the structure, and supporting environment variable
    overrides for the origin region and region validation.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file.
                        If None, auto-detects omi.yaml in current directory.

        Raises:
            ConfigurationError: When configuration file is invalid
        """
        self._config: Dict[str, Any] = {}
        self._config_path = self._resolve_config_path(config_path)
        self._load_configuration()
        self._validate_configuration()
        self._apply_environment_overrides()

    def _resolve_config_path(self, config_path: Optional[str]) -> Path:
        """Resolve configuration file path.

        Args:
            config_path: Optional path to configuration file

        Returns:
            Resolved Path object to configuration file

        Raises:
            ConfigurationError: When configuration file not found
        """
        if config_path:
            path = Path(config_path)
        else:
            path = Path("omi.yaml")
            if not path.exists():
                path = Path("config/omi.yaml")

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}. "
                "Please create a configuration file or specify a valid path."
            )

        return path

    def _load_configuration(self) -> None:
        """Load configuration from YAML file.

        Raises:
            ConfigurationError: When YAML file is invalid
        """
        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {self._config_path}: {e}"
            )
        except IOError as e:
            raise ConfigurationError(
                f"Unable to read configuration file {self._config_path}: {e}"
            )

        if not isinstance(self._config, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_path} must contain a mapping"
            )

    def _validate_configuration(self) -> None:
        """Validate configuration has required sections.

        Raises:
            ConfigurationError: When required sections are missing or malformed
        """
        if "omi" not in self._config:
            raise ConfigurationError("Required configuration section 'omi' is missing")

        if not isinstance(self._config["omi"], dict):
            raise ConfigurationError("Section 'omi' must be a mapping")

        access = self._config.get("access")
        if access is not None and not isinstance(access, dict):
            raise ConfigurationError("Section 'access' must be a mapping")

        known_regions = self._config.get("known_regions")
        if known_regions is not None and not isinstance(known_regions, list):
            raise ConfigurationError("Field 'known_regions' must be a list")

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        if "OUTSCALE_REGION" in os.environ:
            self._set_nested_value("access.region", os.environ["OUTSCALE_REGION"])

        if "OMI_SKIP_REGION_VALIDATION" in os.environ:
            value = os.environ["OMI_SKIP_REGION_VALIDATION"].strip().lower()
            self._set_nested_value(
                "omi.skip_region_validation", value in TRUTHY_VALUES
            )

    def _set_nested_value(self, key_path: str, value: Any) -> None:
        """Set nested configuration value using dot notation.

        Args:
            key_path: Dot-separated key path (e.g., 'access.region')
            value: Value to set
        """
        keys = key_path.split(".")
        current = self._config

        for key in keys[:-1]:
            if current.get(key) is None:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key_path: Dot-separated key path (e.g., 'omi.omi_name')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        current = self._config

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_omi_section(self) -> Dict[str, Any]:
        """Get the OMI configuration section.

        Returns:
            OMI configuration dictionary
        """
        return self.get("omi", {})

    def get_access_section(self) -> Dict[str, Any]:
        """Get the access context section.

        Returns:
            Access configuration dictionary (empty when absent)
        """
        return self.get("access") or {}

    def get_known_regions(self) -> Optional[List[str]]:
        """Get the list of region names accepted as copy targets.

        Returns:
            List of region names, or None when region names are not checked
        """
        return self.get("known_regions")
