"""
Validation System for database-backed records

Key Components:
- Validator: Runs individual rules or a whole rule map against a record
- RuleSet: Ordered rules parsed from a declarative rule map
- ValidatorConfig: Message templates and storage error policy
- ValidationResult: Non-raising validation outcome
- ValidationReporter: Formats and outputs validation results
"""

from .base import ValidationResult
from .config import ValidatorConfig
from .reporter import ValidationReporter
from .ruleset import RuleSet
from .validator import Validator, is_falsy, strictly_equal

__all__ = [
    "RuleSet",
    "ValidationReporter",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "is_falsy",
    "strictly_equal",
]
