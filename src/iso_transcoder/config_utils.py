#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module for common configuration utilities
# - find_line_number follows the parent keys instead of matching by indent only
# - Added get_by_path dot-notation lookup shared by manager and validator
#

"""
config_utils.py - Common utilities for iso-cvt configuration modules
"""

from typing import Any


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the line number of a configuration key in the YAML file.

    Args:
        key_path: Dot-separated path to key
        config_lines: Configuration file lines

    Returns:
        1-based line number or None if not found
    """
    if not config_lines:
        return None

    keys = key_path.split(".")
    depth = 0  # number of keys of the path matched so far

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = len(line) - len(line.lstrip())
        level = indent // 2  # YAML typically uses 2-space indent

        # Left the section we were descending into
        if level < depth:
            depth = level

        if level == depth and stripped.startswith(f"{keys[depth]}:"):
            depth += 1
            if depth == len(keys):
                return i

    return None


def get_by_path(config: dict[str, Any], key_path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        key_path: Dot-separated path (e.g., 'logging.level')
        default: Value returned when any key is missing

    Returns:
        Configuration value or default
    """
    value: Any = config
    for key in key_path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
