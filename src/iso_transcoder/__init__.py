#!/usr/bin/env python3
# -*- coding: utf-8 -*-

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
iso-transcoder - ISO 8859-1 accented characters to and from ASCII conventions

Converts between Latin-1 text and TeX accent macros, German and Spanish
quote digraphs, SGML named entities and Duden transliterations by applying
ordered regex rule tables to a region of a text buffer.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

from .models import (
    ConversionDirection,
    ConversionError,
    GermanStrictness,
    InvalidPatternError,
    Rule,
    RuleTable,
    UnsupportedDirectionError,
)
from .text_buffer import StringBuffer, TextBuffer
from .rule_engine import apply_rule_table, apply_rules_to_text
from .conversions import (
    convert_region,
    convert_text,
    german_to_iso,
    german_to_iso_aggressive,
    german_to_iso_conservative,
    gtex_to_iso,
    iso_to_duden,
    iso_to_gtex,
    iso_to_sgml,
    iso_to_tex,
    read_only,
    sgml_to_iso,
    spanish_to_iso,
    tex_to_iso,
    write_only,
)
from .format_registry import (
    DEFAULT_REGISTRY,
    FileFormat,
    FormatRegistry,
    MenuTree,
    build_menu,
    decode_text,
    encode_text,
)

__all__ = [
    "ConversionDirection",
    "ConversionError",
    "GermanStrictness",
    "InvalidPatternError",
    "Rule",
    "RuleTable",
    "UnsupportedDirectionError",
    "StringBuffer",
    "TextBuffer",
    "apply_rule_table",
    "apply_rules_to_text",
    "convert_region",
    "convert_text",
    "german_to_iso",
    "german_to_iso_aggressive",
    "german_to_iso_conservative",
    "gtex_to_iso",
    "iso_to_duden",
    "iso_to_gtex",
    "iso_to_sgml",
    "iso_to_tex",
    "read_only",
    "sgml_to_iso",
    "spanish_to_iso",
    "tex_to_iso",
    "write_only",
    "DEFAULT_REGISTRY",
    "FileFormat",
    "FormatRegistry",
    "MenuTree",
    "build_menu",
    "decode_text",
    "encode_text",
]
