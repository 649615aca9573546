#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module to handle configuration loading and merging
# - Handles file I/O, YAML parsing, and config merging
# - Creates the commented default file on first use
#

"""
config_loader.py - Configuration loading and merging utilities for iso-cvt
"""

import sys
import yaml
import logging
from pathlib import Path
from typing import Any

from .common_yaml_utils import load_safe_yaml, merge_yaml_configs
from .config_schema import DEFAULT_CONFIG_TEMPLATE
from .config_error_reporter import ConfigErrorReporter


class ConfigLoader:
    """Handles loading and merging of configuration files."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None, create_default: bool = True):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file
            logger: Logger instance
            create_default: Write the default template when the file is missing
        """
        self.config_path = config_path
        self.logger = logger or logging.getLogger(__name__)
        self.create_default = create_default
        self._config_lines: list[str] = []  # Store file lines for error reporting
        self.error_reporter = ConfigErrorReporter()

    def load_config(self) -> dict[str, Any]:
        """
        Load configuration from file or create default.

        Returns:
            Configuration dictionary (not yet merged with defaults)

        Raises:
            SystemExit: If the file is not valid YAML
        """
        if not self.config_path.exists():
            if not self.create_default:
                self.logger.debug(f"Configuration file {self.config_path} not found. Using defaults.")
                return self.get_default_config()
            self.logger.info(f"Configuration file not found. Creating default at: {self.config_path}")
            self._create_default_config()

        try:
            config = load_safe_yaml(self.config_path)
        except yaml.YAMLError as e:
            self.error_reporter.report_yaml_error(e, self.config_path)
            sys.exit(1)

        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()

        with open(self.config_path, "r", encoding="utf-8") as f:
            self._config_lines = f.read().split("\n")

        return config

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(DEFAULT_CONFIG_TEMPLATE)
            self.logger.info("Default configuration file created successfully.")
        except OSError as e:
            self.logger.error(f"Failed to create configuration file: {e}")
            raise

    def get_default_config(self) -> dict[str, Any]:
        """
        Get default configuration as dictionary.

        Returns:
            Default configuration dictionary
        """
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """
        Merge user config with defaults to ensure all keys exist.

        Args:
            config: User configuration

        Returns:
            Merged configuration
        """
        return merge_yaml_configs(self.get_default_config(), config)

    def get_config_lines(self) -> list[str]:
        """Get configuration file lines for error reporting."""
        return self._config_lines
