#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_yaml_utils module.
"""

import pytest
import sys
import yaml
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_transcoder.common_yaml_utils import dump_safe_yaml, load_safe_yaml, merge_yaml_configs


class TestLoadSafeYaml:
    """Test loading YAML files."""

    def test_load_mapping(self, config_file):
        """Test loading the default configuration."""
        data = load_safe_yaml(config_file)
        assert data["conversion"]["german_strictness"] == "aggressive"
        assert data["conversion"]["default_direction"] is None
        assert data["text_processing"]["fallback_encodings"] == ["utf-8", "iso-8859-1"]

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ValueError."""
        with pytest.raises(ValueError, match="not found"):
            load_safe_yaml(tmp_path / "missing.yml")

    def test_empty_file(self, tmp_path):
        """Test that an empty file loads as an empty mapping."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_safe_yaml(path) == {}

    def test_non_mapping_root(self, tmp_path):
        """Test that a list at the root is rejected."""
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="dictionary"):
            load_safe_yaml(path)

    def test_syntax_error_propagates(self, tmp_path):
        """Test that YAML errors reach the caller."""
        path = tmp_path / "bad.yml"
        path.write_text("logging:\n  level: [INFO\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_safe_yaml(path)


class TestMergeAndDump:
    """Test merging and serializing configurations."""

    def test_deep_merge(self):
        """Test that nested keys are merged and overrides win."""
        base = {"logging": {"level": "WARNING", "file_enabled": False}, "conversion": {"x": 1}}
        override = {"logging": {"level": "DEBUG"}}
        merged = merge_yaml_configs(base, override)
        assert merged == {"logging": {"level": "DEBUG", "file_enabled": False}, "conversion": {"x": 1}}
        assert base["logging"]["level"] == "WARNING"

    def test_dump_keeps_order_and_unicode(self):
        """Test that keys stay in insertion order and Unicode is not escaped."""
        text = dump_safe_yaml({"z": "ä", "a": 1})
        assert text == "z: ä\na: 1\n"
