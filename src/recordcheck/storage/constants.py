"""
Constants for the SQLite record storage.

This module defines:
- File and table names
- SQL templates, filled with validated table and column identifiers
"""

# Database file name
DEFAULT_DB = "records.db"

# Table used when none is given
DEFAULT_TABLE = "models"

ID_COLUMN = "id"

# SQL Schema Definitions

TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS {table} (
    id INTEGER PRIMARY KEY AUTOINCREMENT{columns}
)
"""

# Record queries
SELECT_BY_ID = "SELECT * FROM {table} WHERE id = ?"
SELECT_ONE_BY_ID = "SELECT 1 FROM {table} WHERE id = ?"
SELECT_WHERE = "SELECT * FROM {table} WHERE {conditions} ORDER BY id LIMIT 1"
INSERT_RECORD = "INSERT INTO {table} ({columns}) VALUES ({placeholders})"
INSERT_EMPTY_RECORD = "INSERT INTO {table} DEFAULT VALUES"
UPDATE_RECORD = "UPDATE {table} SET {assignments} WHERE id = ?"
DELETE_RECORD = "DELETE FROM {table} WHERE id = ?"
