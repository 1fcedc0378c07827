"""
Tests for core models and rule enumeration.
"""

import pytest

from recordcheck.core.enums import RULE_NAMES, RuleKind
from recordcheck.core.models import Record, RuleSpec


def test_record_get_set():
    record = Record({"name": "Jonathan"})
    assert record.get("name") == "Jonathan"
    assert record.get("location") is None

    record.set("location", "New York")
    assert record.get("location") == "New York"
    assert record.to_dict() == {"name": "Jonathan", "location": "New York"}


def test_record_copies_attributes():
    attributes = {"name": "x"}
    record = Record(attributes)
    record.set("name", "y")
    assert attributes == {"name": "x"}


def test_record_identity():
    record = Record({"id": 4})
    assert record.id == 4
    assert Record().id is None
    assert Record().collection() is None


def test_rule_kind_from_name():
    assert RuleKind.from_name("required") is RuleKind.REQUIRED
    assert RuleKind.from_name("minLength") is RuleKind.MIN_LENGTH
    assert RuleKind.from_name("max_length") is RuleKind.MAX_LENGTH
    assert RuleKind.from_name("bogus") is None


def test_rule_names_cover_every_kind():
    assert set(RuleKind) == {RuleKind.from_name(name) for name in RULE_NAMES}


def test_rule_spec_validation():
    with pytest.raises(ValueError, match="attribute must be a non-empty string"):
        RuleSpec(attribute="", kind=RuleKind.REQUIRED)

    with pytest.raises(TypeError, match="kind must be a RuleKind enum"):
        RuleSpec(attribute="name", kind="required")

    with pytest.raises(TypeError, match="message must be a string"):
        RuleSpec(attribute="name", kind=RuleKind.REQUIRED, message=5)
