#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for rule_engine module.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iso_transcoder.models import Rule, RuleTable
from iso_transcoder.rule_engine import apply_rule, apply_rule_table, apply_rules_to_text
from iso_transcoder.rules_sgml import ISO_TO_SGML_TABLE
from iso_transcoder.text_buffer import StringBuffer


class TestApplyRule:
    """Test applying a single rule."""

    def test_no_match_keeps_end(self):
        """Test that a rule without matches leaves the buffer untouched."""
        buffer = StringBuffer("abc")
        assert apply_rule(buffer, 0, 3, Rule("x", "y")) == 3
        assert buffer.text == "abc"

    def test_group_reference_in_template(self):
        """Test that captured groups are substituted into the replacement."""
        buffer = StringBuffer("m'a p'e")
        end = apply_rule(buffer, 0, len(buffer), Rule(r"([a-z])'([a-z])", r"\2\1"))
        assert buffer.text == "am ep"
        assert end == 5


class TestApplyRuleTable:
    """Test the ordered rule table algorithm."""

    def test_rules_apply_in_sequence(self):
        """Test that later rules see the output of earlier rules."""
        table = RuleTable.from_pairs("t", [("a", "b"), ("b", "c")])
        assert apply_rules_to_text("a", table) == "c"

    def test_reversed_order_differs(self):
        """Test that rule order changes the result."""
        table = RuleTable.from_pairs("t", [("b", "c"), ("a", "b")])
        assert apply_rules_to_text("a", table) == "b"

    def test_replacement_is_not_rescanned(self):
        """Test that a rule does not match inside its own replacement text."""
        grow = RuleTable.from_pairs("grow", [("a", "aa")])
        assert apply_rules_to_text("aaa", grow) == "aaaaaa"

        shrink = RuleTable.from_pairs("shrink", [("ab", "b")])
        assert apply_rules_to_text("aab", shrink) == "ab"

    def test_region_only(self):
        """Test that text outside the region is never modified."""
        buffer = StringBuffer("ä|ä|ä")
        end = apply_rule_table(buffer, 2, 3, ISO_TO_SGML_TABLE)
        assert buffer.text == "ä|&auml;|ä"
        assert end == 8

    def test_end_tracks_growth_and_shrinkage(self):
        """Test that the returned end follows every rule's length change."""
        table = RuleTable.from_pairs("t", [("x", "xyz"), ("y", "")])
        buffer = StringBuffer("yxxy")
        end = apply_rule_table(buffer, 1, 3, table)
        assert buffer.text == "yxzxzy"
        assert end == 5

    def test_later_rule_limited_to_updated_region(self):
        """Test that a rule after growth still stops at the new end."""
        table = RuleTable.from_pairs("t", [("a", "ab"), ("b", "c")])
        buffer = StringBuffer("ab")
        end = apply_rule_table(buffer, 0, 1, table)
        assert buffer.text == "acb"
        assert end == 2

    def test_empty_region(self):
        """Test that an empty region is a no-op."""
        buffer = StringBuffer("ä")
        assert apply_rule_table(buffer, 1, 1, ISO_TO_SGML_TABLE) == 1
        assert buffer.text == "ä"

    def test_case_sensitive(self):
        """Test that matching never folds case."""
        table = RuleTable.from_pairs("t", [("a", "x")])
        assert apply_rules_to_text("aA", table) == "xA"

    @pytest.mark.parametrize("start,end", [(2, 1), (-1, 2), (0, 10)])
    def test_invalid_region(self, start, end):
        """Test that reversed or out of range regions raise ValueError."""
        with pytest.raises(ValueError, match="Invalid region"):
            apply_rule_table(StringBuffer("abcd"), start, end, ISO_TO_SGML_TABLE)

    def test_idempotent_on_plain_ascii(self):
        """Test that text without convertible characters is unchanged."""
        text = "plain ASCII & <markup>"
        assert apply_rules_to_text(text, ISO_TO_SGML_TABLE) == text
