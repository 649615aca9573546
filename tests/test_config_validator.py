#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for config_validator module.
"""

import copy
import pytest
import sys
import yaml
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_transcoder.config_schema import DEFAULT_CONFIG_TEMPLATE
from iso_transcoder.config_validator import ConfigValidator


@pytest.fixture
def defaults():
    """Default configuration as a dictionary"""
    return yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)


@pytest.fixture
def validator(mock_logger):
    """Validator with a mock logger"""
    return ConfigValidator(mock_logger)


class TestValidateConfigFirstError:
    """Test configuration validation."""

    def test_defaults_are_valid(self, validator, defaults):
        """Test that the default template passes validation."""
        lines = DEFAULT_CONFIG_TEMPLATE.split("\n")
        assert validator.validate_config_first_error(defaults, defaults, lines) is None

    def test_unknown_key(self, validator, defaults):
        """Test that an unknown top-level key is reported with its line."""
        config = copy.deepcopy(defaults)
        config["translation"] = {}
        lines = ["translation:", "  x: 1"]
        error = validator.validate_config_first_error(config, defaults, lines)
        assert error["type"] == "unknown_key"
        assert error["line"] == 1

    def test_missing_section(self, validator, defaults):
        """Test that a missing section is reported."""
        config = copy.deepcopy(defaults)
        del config["logging"]
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "missing_section"
        assert error["section"] == "logging"

    def test_section_not_mapping(self, validator, defaults):
        """Test that a scalar section is reported."""
        config = copy.deepcopy(defaults)
        config["conversion"] = "aggressive"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "invalid_type"
        assert error["path"] == "conversion"

    def test_invalid_strictness(self, validator, defaults):
        """Test that an unknown strictness lists the valid values."""
        config = copy.deepcopy(defaults)
        config["conversion"]["german_strictness"] = "lenient"
        lines = DEFAULT_CONFIG_TEMPLATE.split("\n")
        error = validator.validate_config_first_error(config, defaults, lines)
        assert error["type"] == "invalid_value"
        assert error["valid_values"] == ["aggressive", "conservative"]
        assert lines[error["line"] - 1].strip().startswith("german_strictness:")

    def test_default_direction(self, validator, defaults):
        """Test that a null default direction is allowed and a bad one is not."""
        config = copy.deepcopy(defaults)
        config["conversion"]["default_direction"] = "tex-to-iso"
        assert validator.validate_config_first_error(config, defaults, []) is None

        config["conversion"]["default_direction"] = "tex-to-html"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "conversion.default_direction"

    def test_invalid_log_level(self, validator, defaults):
        """Test that log levels are checked."""
        config = copy.deepcopy(defaults)
        config["logging"]["level"] = "VERBOSE"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "logging.level"

    def test_invalid_type(self, validator, defaults):
        """Test that a wrongly typed value is reported."""
        config = copy.deepcopy(defaults)
        config["text_processing"]["fallback_encodings"] = "utf-8"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["type"] == "invalid_type"
        assert "expected list, got str" in error["message"]

    def test_first_error_only(self, validator, defaults):
        """Test that only the first problem is returned."""
        config = copy.deepcopy(defaults)
        config["logging"]["level"] = "VERBOSE"
        config["logging"]["file_enabled"] = "yes"
        error = validator.validate_config_first_error(config, defaults, [])
        assert error["path"] == "logging.level"


class TestReportSingleError:
    """Test error reporting."""

    def test_report_invalid_value(self, validator, capsys):
        """Test that the line, the offending text and valid values are printed."""
        error = {
            "type": "invalid_value",
            "path": "logging.level",
            "value": "VERBOSE",
            "valid_values": ["DEBUG", "INFO"],
            "line": 2,
            "message": "Invalid value 'VERBOSE' for logging.level.",
        }
        validator.report_single_error(error, ["logging:", "  level: VERBOSE"])
        err = capsys.readouterr().err
        assert "line 2: Invalid value 'VERBOSE' for logging.level." in err
        assert "level: VERBOSE" in err
        assert "Valid values: DEBUG, INFO" in err

    def test_report_unknown_line(self, validator, capsys):
        """Test reporting an error without a line number."""
        error = {"type": "missing_section", "section": "logging", "line": None, "message": "Expected section"}
        validator.report_single_error(error, [])
        assert "line unknown: Expected section" in capsys.readouterr().err
