"""Utilities for SQLite database operations."""

import logging
import os
import re
import sqlite3
from typing import Any, Dict, List, Tuple

import aiosqlite

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)

IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_identifier(name: str) -> str:
    """
    Check that a table or column name is a plain SQL identifier.

    Args:
        name: Identifier to check

    Returns:
        The identifier, unchanged

    Raises:
        ValueError: If the name could not be used unquoted in SQL
    """
    if not isinstance(name, str) or not IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


async def initialize_table(db_path: str, schema: str) -> None:
    """
    Initialize a table in the SQLite database.

    Args:
        db_path: Path to SQLite database
        schema: SQL schema for table creation

    Raises:
        StorageError: If initialization fails
    """
    try:
        async with aiosqlite.connect(db_path) as db:
            await db.execute(schema)
            await db.commit()
    except Exception as e:
        logger.error(f"Failed to initialize table: {str(e)}")
        raise StorageError(f"Failed to initialize table: {str(e)}")


def build_conditions(where: Dict[str, Any]) -> Tuple[str, List[Any]]:
    """
    Build an equality WHERE clause from a filter mapping.

    None values are matched with ``IS NULL``.

    Args:
        where: Mapping of column name to required value

    Returns:
        Tuple of SQL condition string and parameter list
    """
    conditions = []
    params: List[Any] = []
    for column, value in where.items():
        if value is None:
            conditions.append(f"{column} IS NULL")
        else:
            conditions.append(f"{column} = ?")
            params.append(value)
    return " AND ".join(conditions), params


def row_to_dict(row: Any) -> Dict[str, Any]:
    """
    Convert SQLite row to a dictionary of attributes.

    Args:
        row: SQLite Row object

    Returns:
        Dictionary of column name to value
    """
    return {key: row[key] for key in row.keys()}


def backup_database(source_path: str, backup_dir: str, filename: str) -> None:
    """
    Create a backup of SQLite database.

    Uses SQLite's built-in backup functionality for atomic backups.

    Args:
        source_path: Path to source database
        backup_dir: Directory to store backup
        filename: Name of backup file

    Raises:
        StorageError: If backup fails
    """
    try:
        backup_path = os.path.join(backup_dir, filename)
        with (
            sqlite3.connect(source_path) as src,
            sqlite3.connect(backup_path) as dst,
        ):
            src.backup(dst)
    except Exception as e:
        logger.error(f"Failed to backup database: {str(e)}")
        raise StorageError(f"Failed to backup database: {str(e)}")


def restore_database(backup_dir: str, target_path: str, filename: str) -> None:
    """
    Restore SQLite database from backup.

    Args:
        backup_dir: Directory containing backup
        target_path: Path to target database
        filename: Name of backup file

    Raises:
        StorageError: If restore fails
    """
    try:
        backup_path = os.path.join(backup_dir, filename)
        if os.path.exists(backup_path):
            with (
                sqlite3.connect(backup_path) as src,
                sqlite3.connect(target_path) as dst,
            ):
                src.backup(dst)
    except Exception as e:
        logger.error(f"Failed to restore database: {str(e)}")
        raise StorageError(f"Failed to restore database: {str(e)}")
