#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation binding every ConversionDirection to its rule table
# - German strictness is an explicit argument instead of a shared selector
#

"""
rule_tables.py - Direction to rule table lookup
===============================================

Re-exports every table and binds each ConversionDirection to exactly one.
"""

from .models import ConversionDirection, GermanStrictness, RuleTable
from .rules_digraphs import (
    GERMAN_TO_ISO_AGGRESSIVE_TABLE,
    GERMAN_TO_ISO_CONSERVATIVE_TABLE,
    ISO_TO_DUDEN_TABLE,
    SPANISH_TO_ISO_TABLE,
)
from .rules_sgml import ISO_TO_SGML_TABLE, SGML_TO_ISO_TABLE
from .rules_tex import (
    GERMAN_TEX_TO_ISO_TABLE,
    ISO_TO_GERMAN_TEX_TABLE,
    ISO_TO_TEX_TABLE,
    TEX_TO_ISO_TABLE,
)

RULE_TABLES: dict[ConversionDirection, RuleTable] = {
    ConversionDirection.SPANISH_TO_ISO: SPANISH_TO_ISO_TABLE,
    ConversionDirection.GERMAN_TO_ISO: GERMAN_TO_ISO_AGGRESSIVE_TABLE,
    ConversionDirection.GERMAN_TO_ISO_CONSERVATIVE: GERMAN_TO_ISO_CONSERVATIVE_TABLE,
    ConversionDirection.ISO_TO_TEX: ISO_TO_TEX_TABLE,
    ConversionDirection.TEX_TO_ISO: TEX_TO_ISO_TABLE,
    ConversionDirection.GERMAN_TEX_TO_ISO: GERMAN_TEX_TO_ISO_TABLE,
    ConversionDirection.ISO_TO_GERMAN_TEX: ISO_TO_GERMAN_TEX_TABLE,
    ConversionDirection.ISO_TO_DUDEN: ISO_TO_DUDEN_TABLE,
    ConversionDirection.ISO_TO_SGML: ISO_TO_SGML_TABLE,
    ConversionDirection.SGML_TO_ISO: SGML_TO_ISO_TABLE,
}


def get_table(direction: ConversionDirection) -> RuleTable:
    """Return the rule table bound to ``direction``."""
    return RULE_TABLES[direction]


def german_direction(strictness: GermanStrictness) -> ConversionDirection:
    """Map a German strictness to its conversion direction."""
    if strictness is GermanStrictness.CONSERVATIVE:
        return ConversionDirection.GERMAN_TO_ISO_CONSERVATIVE
    return ConversionDirection.GERMAN_TO_ISO


__all__ = [
    "RULE_TABLES",
    "get_table",
    "german_direction",
    "SPANISH_TO_ISO_TABLE",
    "GERMAN_TO_ISO_AGGRESSIVE_TABLE",
    "GERMAN_TO_ISO_CONSERVATIVE_TABLE",
    "ISO_TO_DUDEN_TABLE",
    "ISO_TO_TEX_TABLE",
    "TEX_TO_ISO_TABLE",
    "ISO_TO_GERMAN_TEX_TABLE",
    "GERMAN_TEX_TO_ISO_TABLE",
    "ISO_TO_SGML_TABLE",
    "SGML_TO_ISO_TABLE",
]
