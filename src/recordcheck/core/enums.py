"""
Enumerations for the validation rule set.

The rule set is fixed and closed. Rule maps name rules by string; those names are
resolved to ``RuleKind`` members up front so an unknown name is caught as a
configuration problem instead of failing during validation.
"""

from enum import Enum
from typing import Optional


class RuleKind(Enum):
    """
    Enumeration of the supported validation rules.

    Values are the rule names accepted in rule maps. ``from_name`` also accepts
    the camelCase spellings ``minLength`` and ``maxLength``.
    """

    REQUIRED = "required"
    MATCH = "match"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    UNIQUE = "unique"

    @classmethod
    def from_name(cls, name: str) -> Optional["RuleKind"]:
        """Resolve a rule name to its kind, or None if the name is unknown."""
        return _RULE_NAMES.get(name)


_RULE_NAMES = {kind.value: kind for kind in RuleKind}
_RULE_NAMES.update(
    {
        "minLength": RuleKind.MIN_LENGTH,
        "maxLength": RuleKind.MAX_LENGTH,
    }
)

RULE_NAMES = tuple(_RULE_NAMES)
