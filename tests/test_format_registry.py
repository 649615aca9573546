#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for format_registry module.
"""

import pytest
import re
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_transcoder.conversions import read_only, tex_to_iso, write_only
from iso_transcoder.format_registry import (
    DEFAULT_REGISTRY,
    FileFormat,
    FormatRegistry,
    build_menu,
    decode_text,
    encode_text,
)
from iso_transcoder.models import UnsupportedDirectionError

READABLE = ["sgml", "tex", "gtex", "german", "german-conservative", "spanish"]
WRITABLE = ["sgml", "tex", "gtex", "duden"]


class TestFormatRegistry:
    """Test registering and looking up formats."""

    def test_default_order(self):
        """Test the default formats and their order."""
        assert DEFAULT_REGISTRY.names() == [
            "sgml",
            "tex",
            "gtex",
            "german",
            "german-conservative",
            "spanish",
            "duden",
        ]
        assert len(DEFAULT_REGISTRY) == 7
        assert "tex" in DEFAULT_REGISTRY

    def test_readable_and_writable(self):
        """Test the one-way formats."""
        assert not DEFAULT_REGISTRY.get("german").writable
        assert DEFAULT_REGISTRY.get("german").readable
        assert not DEFAULT_REGISTRY.get("duden").readable
        assert DEFAULT_REGISTRY.get("duden").writable

    def test_duplicate_name(self):
        """Test that a name can only be registered once."""
        registry = FormatRegistry()
        file_format = FileFormat("tex", "TeX", None, tex_to_iso, read_only)
        registry.register(file_format)
        with pytest.raises(ValueError, match="already registered"):
            registry.register(file_format)

    def test_unknown_name(self):
        """Test that an unknown name lists the known formats."""
        with pytest.raises(KeyError, match="Unknown format 'latex'"):
            DEFAULT_REGISTRY.get("latex")


class TestDetection:
    """Test format auto-detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Stra&szlig;e", "sgml"),
            ("Stra\\ss e", "tex"),
            ('M\\"uller', "tex"),
            ("gar\\c con", "tex"),
            ('Gr"u"se', "german"),
            ("espa~nol", "spanish"),
        ],
    )
    def test_detects(self, text, expected):
        """Test that characteristic sequences select their format."""
        assert DEFAULT_REGISTRY.detect(text).name == expected

    def test_plain_text(self):
        """Test that plain text is not detected as anything."""
        assert DEFAULT_REGISTRY.detect("plain text & more") is None

    def test_write_only_never_detected(self):
        """Test that formats that cannot be read are skipped."""
        registry = FormatRegistry([FileFormat("x", "X", re.compile("x"), write_only, read_only)])
        assert registry.detect("x") is None


class TestTextHelpers:
    """Test decode_text and encode_text."""

    def test_decode(self):
        """Test decoding a whole string."""
        assert decode_text("&auml;", "sgml") == "ä"

    def test_encode(self):
        """Test encoding a whole string."""
        assert encode_text("Grüße", "duden") == "Gruesse"

    def test_encode_read_only(self):
        """Test that a read-only format cannot be written."""
        with pytest.raises(UnsupportedDirectionError, match="read-only"):
            encode_text("ü", "spanish")

    def test_decode_write_only(self):
        """Test that a write-only format cannot be read."""
        with pytest.raises(UnsupportedDirectionError, match="write-only"):
            decode_text("ue", "duden")


class TestBuildMenu:
    """Test menu construction."""

    def test_menu_titles(self):
        """Test the four menus and their order."""
        menu_tree = build_menu(DEFAULT_REGISTRY)
        assert [menu.title for menu in menu_tree] == [
            "Load As",
            "Write As",
            "Translate to",
            "Translate from",
        ]

    def test_menu_contents(self):
        """Test that decode menus list readable and encode menus writable formats."""
        menu_tree = build_menu(DEFAULT_REGISTRY)
        assert [item.format_name for item in menu_tree.load_as.items] == READABLE
        assert [item.format_name for item in menu_tree.translate_from.items] == READABLE
        assert [item.format_name for item in menu_tree.write_as.items] == WRITABLE
        assert [item.format_name for item in menu_tree.translate_to.items] == WRITABLE

    def test_menu_functions(self):
        """Test that menu items carry the matching region function."""
        menu_tree = build_menu(DEFAULT_REGISTRY)
        tex = DEFAULT_REGISTRY.get("tex")
        load_tex = next(item for item in menu_tree.load_as.items if item.format_name == "tex")
        write_tex = next(item for item in menu_tree.write_as.items if item.format_name == "tex")
        assert load_tex.action is tex.decode
        assert write_tex.action is tex.encode
        assert load_tex.label == "TeX (encoding)"

    def test_empty_registry(self):
        """Test that an empty registry gives empty menus."""
        menu_tree = build_menu(FormatRegistry())
        assert all(menu.items == () for menu in menu_tree)
