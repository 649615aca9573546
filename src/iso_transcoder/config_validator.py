#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module to handle configuration validation
# - Checks unknown top-level keys, missing sections and enumerated values
# - Returns only the FIRST error found, like the loader reports it
#

"""
config_validator.py - Configuration validation utilities for iso-cvt
"""

import logging
from typing import Any

from .config_error_reporter import ConfigErrorReporter
from .config_schema import (
    REQUIRED_SECTIONS,
    VALID_DIRECTIONS,
    VALID_LOG_LEVELS,
    VALID_STRICTNESS,
)
from .config_utils import find_line_number, get_by_path

# (key path, allowed values, whether null is allowed)
_ENUMERATED_VALUES = [
    ("conversion.german_strictness", VALID_STRICTNESS, False),
    ("conversion.default_direction", VALID_DIRECTIONS, True),
    ("logging.level", VALID_LOG_LEVELS, False),
]

# (key path, expected type)
_TYPED_VALUES = [
    ("text_processing.input_encoding", str),
    ("text_processing.output_encoding", str),
    ("text_processing.fallback_encodings", list),
    ("logging.file_enabled", bool),
    ("logging.file_path", str),
    ("logging.format", str),
]


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize configuration validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_reporter = ConfigErrorReporter()

    def validate_config_first_error(self, config: dict[str, Any], defaults: dict[str, Any], config_lines: list[str]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration to validate (before merging with defaults)
            defaults: Default configuration for reference
            config_lines: Configuration file lines for error reporting

        Returns:
            First error found or None if valid
        """
        valid_top_keys = set(defaults.keys())

        for key in config.keys():
            if key not in valid_top_keys:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "line": find_line_number(key, config_lines),
                    "message": f"Unknown or malformed key '{key}' found.",
                }

        for section, description in REQUIRED_SECTIONS.items():
            if section not in config:
                return {
                    "type": "missing_section",
                    "section": section,
                    "line": None,
                    "message": f"Expected section '{section}' not found ({description}).",
                }
            if not isinstance(config[section], dict):
                return {
                    "type": "invalid_type",
                    "path": section,
                    "line": find_line_number(section, config_lines),
                    "message": f"Section '{section}' must be a mapping.",
                }

        for key_path, valid_values, nullable in _ENUMERATED_VALUES:
            missing = object()
            value = get_by_path(config, key_path, missing)
            if value is missing or (value is None and nullable):
                continue
            if value not in valid_values:
                return {
                    "type": "invalid_value",
                    "path": key_path,
                    "value": value,
                    "valid_values": valid_values,
                    "line": find_line_number(key_path, config_lines),
                    "message": f"Invalid value '{value}' for {key_path}.",
                }

        for key_path, expected_type in _TYPED_VALUES:
            missing = object()
            value = get_by_path(config, key_path, missing)
            if value is missing:
                continue
            if not isinstance(value, expected_type):
                return {
                    "type": "invalid_type",
                    "path": key_path,
                    "line": find_line_number(key_path, config_lines),
                    "message": f"Invalid type for {key_path}: expected {expected_type.__name__}, got {type(value).__name__}.",
                }

        return None

    def report_single_error(self, error: dict[str, Any], config_lines: list[str]) -> None:
        """
        Report a single validation error.

        Args:
            error: Error information
            config_lines: Configuration file lines
        """
        self.error_reporter.report_single_error(error, config_lines)
