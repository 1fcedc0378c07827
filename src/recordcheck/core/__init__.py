"""Core record validation types."""

from .enums import RULE_NAMES, RuleKind
from .exceptions import (
    ConfigurationError,
    QueryError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)
from .formatting import fmt
from .models import Record, RuleSpec
from .types import Attributes, RecordCollection

__all__ = [
    "Attributes",
    "ConfigurationError",
    "QueryError",
    "Record",
    "RecordCollection",
    "RecordNotFoundError",
    "RULE_NAMES",
    "RuleKind",
    "RuleSpec",
    "StorageError",
    "ValidationError",
    "fmt",
]
