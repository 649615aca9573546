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
# - Added Rule and RuleTable immutable records
# - Added ConversionDirection and GermanStrictness enums
# - Added conversion error hierarchy
#

"""Data models for the ISO 8859-1 transcoder rule tables."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator


class ConversionError(Exception):
    """Base class for all conversion errors."""


class InvalidPatternError(ConversionError):
    """A rule table contains a malformed or case-folding regular expression."""


class UnsupportedDirectionError(ConversionError):
    """A one-way format was used in the direction it does not support."""


class ConversionDirection(enum.Enum):
    """Conversion directions, each bound to exactly one rule table."""

    SPANISH_TO_ISO = "spanish-to-iso"
    """Spanish tilde/apostrophe digraphs to Latin-1."""
    GERMAN_TO_ISO = "german-to-iso"
    """German quote digraphs to Latin-1, anywhere in the text."""
    GERMAN_TO_ISO_CONSERVATIVE = "german-to-iso-conservative"
    """German quote digraphs to Latin-1, only after a letter."""
    ISO_TO_TEX = "iso-to-tex"
    TEX_TO_ISO = "tex-to-iso"
    GERMAN_TEX_TO_ISO = "german-tex-to-iso"
    ISO_TO_GERMAN_TEX = "iso-to-german-tex"
    ISO_TO_DUDEN = "iso-to-duden"
    """Lossy; there is no reverse table."""
    ISO_TO_SGML = "iso-to-sgml"
    SGML_TO_ISO = "sgml-to-iso"


class GermanStrictness(enum.Enum):
    """Which German digraph table to apply."""

    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"


@dataclass(frozen=True)
class Rule:
    """
    A single (pattern, replacement) rewrite rule.

    The replacement is an ``re`` template and may reference groups of the
    pattern (``\\1``, ``\\g<1>``). The pattern is compiled on construction.

    Raises:
        InvalidPatternError: If the pattern does not compile or enables
            case-insensitive matching.
    """

    pattern: str
    replacement: str
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise InvalidPatternError(f"Invalid rule pattern {self.pattern!r}: {e}") from e

        if compiled.flags & re.IGNORECASE:
            raise InvalidPatternError(f"Rule pattern {self.pattern!r} must be case-sensitive")

        # Parse the template now so bad group references fail at table construction
        try:
            compiled.sub(self.replacement, "")
        except (re.error, IndexError) as e:
            raise InvalidPatternError(f"Invalid replacement {self.replacement!r} for {self.pattern!r}: {e}") from e

        object.__setattr__(self, "regex", compiled)


@dataclass(frozen=True)
class RuleTable:
    """A named, ordered and immutable sequence of rules."""

    name: str
    rules: tuple[Rule, ...]

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[tuple[str, str]]) -> RuleTable:
        """
        Build a table from (pattern, replacement) pairs, keeping their order.

        Args:
            name: Table name used in log messages
            pairs: Ordered (pattern, replacement) pairs

        Returns:
            The constructed RuleTable
        """
        return cls(name=name, rules=tuple(Rule(pattern, replacement) for pattern, replacement in pairs))

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __add__(self, other: RuleTable) -> RuleTable:
        return RuleTable(name=f"{self.name}+{other.name}", rules=self.rules + other.rules)
