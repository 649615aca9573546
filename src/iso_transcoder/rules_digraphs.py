#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation with the Spanish and German digraph tables
# - Added the one-way Duden transliteration table
#

"""
rules_digraphs.py - Rule tables for plain-text ASCII digraph conventions
========================================================================

Spanish and German writers without a Latin-1 keyboard type accented
letters as two ASCII characters. These tables read such text; only the
Duden table goes the other way, and it is lossy.
"""

from .models import RuleTable
from .rule_builders import GERMAN_DIGRAPHS, literal

# ASCII and Latin-1 letters; Latin-1 so that a digraph after an already
# converted letter (Gr"u"se) still counts
_LETTER = "a-zA-ZÀ-ÖØ-öø-ÿ"

# A digraph only counts after one of these in the conservative tables
_WORD_CHAR = "([-" + _LETTER + "\"`])"
_WORD_LETTER = "([-" + _LETTER + "])"

SPANISH_TO_ISO_TABLE = RuleTable.from_pairs(
    "spanish-to-iso",
    [
        ("~n", "ñ"),
        ("~N", "Ñ"),
        (_WORD_CHAR + '"u', r"\1ü"),
        (_WORD_CHAR + '"U', r"\1Ü"),
        (_WORD_LETTER + "'a", r"\1á"),
        (_WORD_LETTER + "'A", r"\1Á"),
        (_WORD_LETTER + "'e", r"\1é"),
        (_WORD_LETTER + "'E", r"\1É"),
        (_WORD_LETTER + "'i", r"\1í"),
        (_WORD_LETTER + "'I", r"\1Í"),
        (_WORD_LETTER + "'o", r"\1ó"),
        (_WORD_LETTER + "'O", r"\1Ó"),
        (_WORD_LETTER + "'u", r"\1ú"),
        (_WORD_LETTER + "'U", r"\1Ú"),
    ],
)

# "a, "o, "u, "s ... anywhere, plus the typewriter \3 for ß
GERMAN_TO_ISO_AGGRESSIVE_TABLE = RuleTable.from_pairs(
    "german-to-iso",
    [literal('"' + letter, char) for char, letter in GERMAN_DIGRAPHS] + [literal("\\3", "ß")],
)

# Same digraphs, but only inside a word, so quoted text like "alles" survives
GERMAN_TO_ISO_CONSERVATIVE_TABLE = RuleTable.from_pairs(
    "german-to-iso-conservative",
    [(_WORD_CHAR + '"' + letter, r"\1" + char) for char, letter in GERMAN_DIGRAPHS]
    + [(_WORD_CHAR + r"\\3", r"\1ß")],
)

ISO_TO_DUDEN_TABLE = RuleTable.from_pairs(
    "iso-to-duden",
    [
        ("ä", "ae"),
        ("Ä", "Ae"),
        ("ö", "oe"),
        ("Ö", "Oe"),
        ("ü", "ue"),
        ("Ü", "Ue"),
        ("ß", "ss"),
    ],
)
