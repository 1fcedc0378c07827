"""
Constants for the validation rules.

Default failure message templates, keyed by rule. Placeholders are filled
positionally by ``fmt``; callers may match on the resulting text, so the wording
must stay stable.
"""

from .enums import RuleKind

REQUIRED_MESSAGE = "#{attribute} is required"
MATCH_MESSAGE = "#{attribute} must match #{testValue}"
MIN_LENGTH_MESSAGE = "#{attribute} must be at least #{testValue} characters long"
MAX_LENGTH_MESSAGE = "#{attribute} must be at most #{testValue} characters long"
# Filled with the offending value first, then the attribute name
PATTERN_MESSAGE = "'#{value}' is not a valid #{attribute}"
UNIQUE_MESSAGE = "#{attribute} must be unique"

DEFAULT_MESSAGES = {
    RuleKind.REQUIRED: REQUIRED_MESSAGE,
    RuleKind.MATCH: MATCH_MESSAGE,
    RuleKind.MIN_LENGTH: MIN_LENGTH_MESSAGE,
    RuleKind.MAX_LENGTH: MAX_LENGTH_MESSAGE,
    RuleKind.PATTERN: PATTERN_MESSAGE,
    RuleKind.UNIQUE: UNIQUE_MESSAGE,
}

# Attribute holding a persisted record's identity
ID_ATTRIBUTE = "id"
