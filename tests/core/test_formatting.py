"""
Tests for message template formatting.
"""

from recordcheck.core.constants import DEFAULT_MESSAGES, PATTERN_MESSAGE
from recordcheck.core.enums import RuleKind
from recordcheck.core.formatting import fmt


def test_single_placeholder():
    assert fmt("#{attribute} is required", "name") == "name is required"


def test_placeholders_filled_in_order():
    result = fmt("#{attribute} must match #{testValue}", "foo", "foo_confirmation")
    assert result == "foo must match foo_confirmation"


def test_placeholder_names_are_ignored():
    """Values are positional, whatever the placeholder is called."""
    assert fmt(PATTERN_MESSAGE, "!", "name") == "'!' is not a valid name"


def test_non_string_values():
    template = DEFAULT_MESSAGES[RuleKind.MIN_LENGTH]
    assert fmt(template, "name", 3) == "name must be at least 3 characters long"


def test_missing_values():
    assert fmt("#{a} and #{b}", "x") == "x and None"


def test_no_placeholders():
    assert fmt("nothing to fill", "x") == "nothing to fill"


def test_values_are_not_reformatted():
    """A value containing placeholder syntax is inserted literally."""
    assert fmt("#{attribute} is required", "#{evil}") == "#{evil} is required"
