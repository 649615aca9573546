#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_file_utils module.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_transcoder.common_file_utils import (
    decode_bytes,
    detect_encoding,
    read_text_file,
    write_text_file,
)


class TestDetectEncoding:
    """Test chardet-based detection."""

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_detect_encoding(self, mock_detect):
        """Test that chardet's guess and confidence are returned."""
        mock_detect.return_value = {"encoding": "ISO-8859-1", "confidence": 0.73}
        assert detect_encoding(b"M\xfcller") == ("ISO-8859-1", 0.73)

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_no_guess(self, mock_detect):
        """Test that an empty guess gives no encoding and zero confidence."""
        mock_detect.return_value = {"encoding": None, "confidence": None}
        assert detect_encoding(b"") == (None, 0.0)

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_read_text_file_detects_with_chardet(self, mock_detect, tmp_path):
        """Test that reading a file in auto mode detects its encoding from the whole content."""
        mock_detect.return_value = {"encoding": "ISO-8859-1", "confidence": 0.8}
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"M\xfcller")
        assert read_text_file(path) == "Müller"
        mock_detect.assert_called_once_with(b"M\xfcller")


class TestDecodeBytes:
    """Test decoding with detection and fallbacks."""

    def test_explicit_encoding(self):
        """Test that a named encoding is used directly."""
        assert decode_bytes(b"M\xfcller", encoding="iso-8859-1") == "Müller"

    def test_explicit_encoding_is_strict(self):
        """Test that a named encoding does not fall back."""
        with pytest.raises(UnicodeDecodeError):
            decode_bytes(b"M\xfcller", encoding="utf-8")

    def test_unknown_encoding(self):
        """Test that an unknown encoding name raises LookupError."""
        with pytest.raises(LookupError):
            decode_bytes(b"abc", encoding="no-such-codec")

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_auto_uses_detected(self, mock_detect):
        """Test that the detected encoding is tried first."""
        mock_detect.return_value = {"encoding": "ISO-8859-1", "confidence": 0.9}
        assert decode_bytes("Grüße".encode("iso-8859-1")) == "Grüße"

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_auto_falls_back(self, mock_detect):
        """Test that a wrong guess falls through to the fallbacks."""
        mock_detect.return_value = {"encoding": "ascii", "confidence": 0.6}
        assert decode_bytes("Grüße".encode("utf-8")) == "Grüße"
        assert decode_bytes("Grüße".encode("iso-8859-1")) == "Grüße"

    @patch("iso_transcoder.common_file_utils.chardet.detect")
    def test_auto_replaces_when_all_fail(self, mock_detect):
        """Test that undecodable data is decoded with replacement characters."""
        mock_detect.return_value = {"encoding": None, "confidence": 0.0}
        assert decode_bytes(b"a\xffb", fallback_encodings=["utf-8"]) == "a�b"


class TestTextFiles:
    """Test reading and writing files."""

    def test_write_and_read(self, tmp_path):
        """Test writing Latin-1 and reading it back."""
        path = tmp_path / "out" / "text.txt"
        write_text_file(path, "Grüße", encoding="iso-8859-1")
        assert path.read_bytes() == b"Gr\xfc\xdfe"
        assert read_text_file(path, encoding="iso-8859-1") == "Grüße"

    def test_write_unencodable(self, tmp_path):
        """Test that characters outside the encoding raise."""
        with pytest.raises(UnicodeEncodeError):
            write_text_file(tmp_path / "x.txt", "€", encoding="iso-8859-1")

    def test_read_missing(self, tmp_path):
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            read_text_file(tmp_path / "missing.txt")
