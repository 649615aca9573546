#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Added one entry point per conversion direction
# - Added read_only/write_only stubs for one-way formats
# - Added convert_region and convert_text dispatch helpers
#

"""
Named conversion entry points.

Every function here has the ``(buffer, start, end) -> new_end`` signature a
host editor expects from a decode or encode function. They only bind a
region to one rule table; the work is done by the rule engine.
"""

from __future__ import annotations

from .models import ConversionDirection, GermanStrictness, UnsupportedDirectionError
from .rule_engine import apply_rule_table, apply_rules_to_text
from .rule_tables import get_table, german_direction
from .text_buffer import TextBuffer

READ_ONLY_MESSAGE = "This format is read-only; specify another format for writing"
WRITE_ONLY_MESSAGE = "This format is write-only"


def convert_region(buffer: TextBuffer, start: int, end: int, direction: ConversionDirection) -> int:
    """
    Convert ``[start, end)`` of ``buffer`` in place.

    Args:
        buffer: Buffer to edit
        start: Region start offset
        end: Region end offset (exclusive)
        direction: Conversion to apply

    Returns:
        The new region end offset
    """
    return apply_rule_table(buffer, start, end, get_table(direction))


def convert_text(text: str, direction: ConversionDirection) -> str:
    """Convert a whole string and return the result."""
    return apply_rules_to_text(text, get_table(direction))


def spanish_to_iso(buffer: TextBuffer, start: int, end: int) -> int:
    """Spanish ``~n`` and ``a'o`` digraphs to Latin-1."""
    return convert_region(buffer, start, end, ConversionDirection.SPANISH_TO_ISO)


def german_to_iso(
    buffer: TextBuffer,
    start: int,
    end: int,
    strictness: GermanStrictness = GermanStrictness.AGGRESSIVE,
) -> int:
    """
    German ``"a`` and ``"s`` digraphs to Latin-1.

    Args:
        buffer: Buffer to edit
        start: Region start offset
        end: Region end offset (exclusive)
        strictness: AGGRESSIVE converts every digraph, CONSERVATIVE only
            those preceded by a letter, hyphen, quote or backquote

    Returns:
        The new region end offset
    """
    return convert_region(buffer, start, end, german_direction(strictness))


def german_to_iso_aggressive(buffer: TextBuffer, start: int, end: int) -> int:
    return convert_region(buffer, start, end, ConversionDirection.GERMAN_TO_ISO)


def german_to_iso_conservative(buffer: TextBuffer, start: int, end: int) -> int:
    return convert_region(buffer, start, end, ConversionDirection.GERMAN_TO_ISO_CONSERVATIVE)


def iso_to_tex(buffer: TextBuffer, start: int, end: int) -> int:
    """Latin-1 to braced TeX accent macros."""
    return convert_region(buffer, start, end, ConversionDirection.ISO_TO_TEX)


def tex_to_iso(buffer: TextBuffer, start: int, end: int) -> int:
    """TeX accent macros to Latin-1."""
    return convert_region(buffer, start, end, ConversionDirection.TEX_TO_ISO)


def gtex_to_iso(buffer: TextBuffer, start: int, end: int) -> int:
    """German TeX (TeX macros plus ``"a`` digraphs) to Latin-1."""
    return convert_region(buffer, start, end, ConversionDirection.GERMAN_TEX_TO_ISO)


def iso_to_gtex(buffer: TextBuffer, start: int, end: int) -> int:
    """Latin-1 to German TeX."""
    return convert_region(buffer, start, end, ConversionDirection.ISO_TO_GERMAN_TEX)


def iso_to_duden(buffer: TextBuffer, start: int, end: int) -> int:
    """Latin-1 umlauts and ß to Duden ASCII spellings. Lossy."""
    return convert_region(buffer, start, end, ConversionDirection.ISO_TO_DUDEN)


def iso_to_sgml(buffer: TextBuffer, start: int, end: int) -> int:
    """Latin-1 letters to SGML named entities."""
    return convert_region(buffer, start, end, ConversionDirection.ISO_TO_SGML)


def sgml_to_iso(buffer: TextBuffer, start: int, end: int) -> int:
    """SGML named entities to Latin-1 letters."""
    return convert_region(buffer, start, end, ConversionDirection.SGML_TO_ISO)


def read_only(buffer: TextBuffer, start: int, end: int) -> int:
    """
    Encode function of a format that can only be read.

    Raises:
        UnsupportedDirectionError: Always; the buffer is not touched
    """
    raise UnsupportedDirectionError(READ_ONLY_MESSAGE)


def write_only(buffer: TextBuffer, start: int, end: int) -> int:
    """
    Decode function of a format that can only be written.

    Raises:
        UnsupportedDirectionError: Always; the buffer is not touched
    """
    raise UnsupportedDirectionError(WRITE_ONLY_MESSAGE)
