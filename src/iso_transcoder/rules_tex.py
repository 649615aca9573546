#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation with the TeX and German TeX rule tables
# - Decoding tables are generated in a fixed order by tex_decoding_pairs()
#

"""
rules_tex.py - Rule tables between Latin-1 and TeX accent macros
================================================================

Four tables:

- ISO_TO_TEX_TABLE: every covered Latin-1 character to its braced macro
- TEX_TO_ISO_TABLE: braced, argument and bare macro spellings to Latin-1
- ISO_TO_GERMAN_TEX_TABLE: as ISO_TO_TEX but umlauts and ß use german.sty
  quote digraphs (``"a``, ``"s``)
- GERMAN_TEX_TO_ISO_TABLE: TEX_TO_ISO followed by the quote digraphs
"""

from .models import RuleTable
from .rule_builders import (
    GERMAN_DIGRAPHS,
    TEX_ACCENTED,
    TEX_CEDILLAS,
    TEX_CONTROL_WORDS,
    TEX_LIGATURES,
    TEX_MATH_SYMBOLS,
    literal,
    tex_decoding_pairs,
    tex_encoding,
)

# Every character the TeX tables can write
TEX_REPERTOIRE = (
    [char for char, _, _ in TEX_ACCENTED]
    + [char for char, _ in TEX_CONTROL_WORDS]
    + [char for char, _ in TEX_CEDILLAS]
    + [char for char, _ in TEX_LIGATURES]
    + [char for char, _ in TEX_MATH_SYMBOLS]
)

_GERMAN_TEX_CHARS = {char for char, _ in GERMAN_DIGRAPHS}

ISO_TO_TEX_TABLE = RuleTable.from_pairs(
    "iso-to-tex",
    [literal(char, tex_encoding(char)) for char in TEX_REPERTOIRE],
)

TEX_TO_ISO_TABLE = RuleTable.from_pairs("tex-to-iso", tex_decoding_pairs())

ISO_TO_GERMAN_TEX_TABLE = RuleTable.from_pairs(
    "iso-to-german-tex",
    [literal(char, '"' + letter) for char, letter in GERMAN_DIGRAPHS]
    + [literal(char, tex_encoding(char)) for char in TEX_REPERTOIRE if char not in _GERMAN_TEX_CHARS],
)

# Quote digraphs run last: the braced TeX spelling {\"a} contains "a
GERMAN_TEX_TO_ISO_TABLE = RuleTable.from_pairs(
    "german-tex-to-iso",
    tex_decoding_pairs() + [literal('"' + letter, char) for char, letter in GERMAN_DIGRAPHS],
)
