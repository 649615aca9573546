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
# - Added apply_rule_table, the generic ordered rewrite algorithm
# - Added apply_rules_to_text convenience wrapper
#

"""
rule_engine.py - Ordered regex rewriting of a buffer region
===========================================================

Every conversion in this package is the same algorithm run over a different
rule table: each rule is applied to the whole region before the next rule is
tried, so later rules see the text produced by earlier ones.
"""

import logging

from .models import Rule, RuleTable
from .text_buffer import StringBuffer, TextBuffer

logger = logging.getLogger(__name__)


def apply_rule(buffer: TextBuffer, start: int, end: int, rule: Rule) -> int:
    """
    Replace every match of a single rule inside ``[start, end)``.

    Matches are found left to right and never overlap. Text inserted by a
    replacement is not searched again by the same rule.

    Args:
        buffer: Buffer to edit in place
        start: Region start offset
        end: Region end offset (exclusive)
        rule: Rule to apply

    Returns:
        The region end offset after all replacements
    """
    region_text = buffer.substring(start, end)
    matches = list(rule.regex.finditer(region_text))
    if not matches:
        return end

    # Edit right to left so the offsets of pending matches stay valid
    delta = 0
    for match in reversed(matches):
        replacement = match.expand(rule.replacement)
        buffer.replace(start + match.start(), start + match.end(), replacement)
        delta += len(replacement) - (match.end() - match.start())

    logger.debug(f"Rule {rule.pattern!r}: {len(matches)} replacement(s), length delta {delta:+d}")
    return end + delta


def apply_rule_table(buffer: TextBuffer, start: int, end: int, table: RuleTable) -> int:
    """
    Apply every rule of ``table`` to the region ``[start, end)``, in order.

    Matching is always case-sensitive. Text outside the region is never
    modified.

    Args:
        buffer: Buffer to edit in place
        start: Region start offset
        end: Region end offset (exclusive)
        table: Ordered rule table

    Returns:
        The region end offset after the whole table has been applied

    Raises:
        ValueError: If the region is reversed or outside the buffer
    """
    if not 0 <= start <= end <= len(buffer):
        raise ValueError(f"Invalid region [{start}, {end}) for buffer of length {len(buffer)}")

    original_end = end
    for rule in table.rules:
        end = apply_rule(buffer, start, end, rule)

    logger.debug(f"Applied table '{table.name}' to [{start}, {original_end}); new end {end}")
    return end


def apply_rules_to_text(text: str, table: RuleTable) -> str:
    """
    Apply a rule table to a whole string.

    Args:
        text: Input text
        table: Ordered rule table

    Returns:
        The converted text
    """
    buffer = StringBuffer(text)
    apply_rule_table(buffer, 0, len(buffer), table)
    return buffer.text
