#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - ConfigManager orchestrates loader and validator
# - Added typed accessors for the German strictness and default direction
# - Command-line arguments override file values in update_with_args
#

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
config_manager.py - Configuration management for iso-cvt
"""

import sys
import logging
from pathlib import Path
from typing import Any

from .config_loader import ConfigLoader
from .config_schema import DEFAULT_CONFIG_FILENAME
from .config_utils import get_by_path
from .config_validator import ConfigValidator
from .models import ConversionDirection, GermanStrictness


class ConfigManager:
    """Manages configuration for the iso-cvt converter."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
        create_default: bool = True,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: iso_cvt_config.yml)
            logger: Logger instance
            create_default: Write the default file when it does not exist
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = config_path or Path(DEFAULT_CONFIG_FILENAME)

        self.loader = ConfigLoader(self.config_path, self.logger, create_default=create_default)
        self.validator = ConfigValidator(self.logger)

        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load, validate and merge configuration with defaults."""
        config = self.loader.load_config()
        defaults = self.loader.get_default_config()

        first_error = self.validator.validate_config_first_error(config, defaults, self.loader.get_config_lines())
        if first_error:
            self.validator.report_single_error(first_error, self.loader.get_config_lines())
            sys.exit(1)

        return self.loader.merge_with_defaults(config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'text_processing.output_encoding')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return get_by_path(self.config, key_path, default)

    @property
    def german_strictness(self) -> GermanStrictness:
        return GermanStrictness(self.get("conversion.german_strictness", GermanStrictness.AGGRESSIVE.value))

    @property
    def default_direction(self) -> ConversionDirection | None:
        value = self.get("conversion.default_direction")
        return ConversionDirection(value) if value else None

    def update_with_args(self, args: Any) -> dict[str, Any]:
        """
        Update configuration with command-line arguments.
        Command-line args take precedence over the config file.

        Args:
            args: Parsed command-line arguments

        Returns:
            Updated configuration dictionary
        """
        overrides = {
            "conversion.german_strictness": getattr(args, "strictness", None),
            "text_processing.input_encoding": getattr(args, "encoding", None),
            "text_processing.output_encoding": getattr(args, "output_encoding", None),
            "logging.level": getattr(args, "log_level", None),
        }

        for key_path, value in overrides.items():
            if value is None:
                continue
            section, key = key_path.split(".")
            self.config.setdefault(section, {})[key] = value
            self.logger.debug(f"Command-line override {key_path} = {value}")

        return self.config
