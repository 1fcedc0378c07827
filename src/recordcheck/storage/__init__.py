"""
SQLite record storage.

This package provides the record collection used by uniqueness checks. The
implementation uses aiosqlite for async database operations and provides:
- Table creation for a fixed set of attribute columns
- Insert/update, lookup by id and deletion of records
- First-match lookup by equality filters
- Backup and restore through SQLite's backup API
"""

from .constants import DEFAULT_DB, DEFAULT_TABLE
from .sqlite import SqliteRecordCollection

__all__ = [
    "DEFAULT_DB",
    "DEFAULT_TABLE",
    "SqliteRecordCollection",
]
