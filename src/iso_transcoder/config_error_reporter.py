#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module to handle error reporting
# - Reports validation errors and YAML syntax errors with line context
#

"""
config_error_reporter.py - Configuration error reporting utilities for iso-cvt
"""

import sys
import yaml
from typing import Any
from pathlib import Path


class ConfigErrorReporter:
    """Reports configuration validation errors on stderr."""

    def report_single_error(self, error: dict[str, Any], config_lines: list[str]) -> None:
        """
        Report a single validation error.

        Args:
            error: Error information as produced by ConfigValidator
            config_lines: Configuration file lines
        """
        line = error.get("line")
        if line is None:
            line = "unknown"

        print(f"\nline {line}: {error['message']}", file=sys.stderr)

        # Echo the offending line
        if error["type"] in ("unknown_key", "invalid_value") and line != "unknown" and config_lines:
            line_idx = int(line) - 1
            if 0 <= line_idx < len(config_lines):
                print(f"  {config_lines[line_idx].strip()}", file=sys.stderr)

        if error.get("valid_values"):
            print(f"  Valid values: {', '.join(str(v) for v in error['valid_values'])}", file=sys.stderr)

    def report_yaml_error(self, error: yaml.YAMLError, config_path: Path) -> None:
        """
        Report YAML parsing errors with line information.

        Args:
            error: YAML parsing error
            config_path: Path to configuration file
        """
        out = sys.stderr
        print("\n" + "=" * 80, file=out)
        print("YAML PARSING ERROR", file=out)
        print("=" * 80, file=out)
        print(f"Failed to parse {config_path}", file=out)
        print(file=out)

        mark = getattr(error, "problem_mark", None)
        if mark is not None:
            print(f"Error at line {mark.line + 1}, column {mark.column + 1}:", file=out)

            # Show the problematic line
            with open(config_path, "r", encoding="utf-8") as f:
                lines = f.readlines()
            if mark.line < len(lines):
                print(f"  {mark.line + 1}: {lines[mark.line].rstrip()}", file=out)
                print(f"  {' ' * (len(str(mark.line + 1)) + 2)}{' ' * mark.column}^", file=out)

        print(file=out)
        print(f"Problem: {getattr(error, 'problem', None) or error}", file=out)
        print(file=out)
        print("Fix the syntax error or delete the config file to regenerate defaults.", file=out)
        print("=" * 80, file=out)
