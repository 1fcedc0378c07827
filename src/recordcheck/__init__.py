"""
recordcheck - Attribute validation for database-backed records

This package validates the attributes of records exposing a get/set interface.
It includes:

- A fixed rule set: required, match, min/max length, pattern and unique
- Declarative rule maps run concurrently with ordered failure reporting
- An aiosqlite-backed record collection for uniqueness lookups
- Result reporting as text, dict or JSON
"""

__version__ = "0.1.0"
__author__ = "recordcheck Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 11):
    raise RuntimeError("recordcheck requires Python 3.11 or higher")

# Import commonly used components for easier access
from .core.exceptions import ConfigurationError, StorageError, ValidationError
from .core.models import Record
from .storage import SqliteRecordCollection
from .validation import ValidationResult, Validator, ValidatorConfig

__all__ = [
    "ConfigurationError",
    "Record",
    "SqliteRecordCollection",
    "StorageError",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
]
