"""SQLite implementation of a record collection."""

import logging
import os
from typing import Any, Dict, Optional, Sequence

import aiosqlite

from ..core.exceptions import QueryError, RecordNotFoundError, StorageError
from ..core.models import Record
from .constants import (
    DEFAULT_DB,
    DEFAULT_TABLE,
    DELETE_RECORD,
    ID_COLUMN,
    INSERT_EMPTY_RECORD,
    INSERT_RECORD,
    SELECT_BY_ID,
    SELECT_ONE_BY_ID,
    SELECT_WHERE,
    TABLE_SCHEMA,
    UPDATE_RECORD,
)
from .persistence import (
    backup_database,
    build_conditions,
    initialize_table,
    restore_database,
    row_to_dict,
    validate_identifier,
)

logger = logging.getLogger(__name__)


class SqliteRecordCollection:
    """
    SQLite-backed collection of records.

    Each collection maps to one table with an integer ``id`` primary key and a
    fixed set of attribute columns. Columns are declared without a type so
    values keep the type they were saved with. A connection is opened per
    operation.

    Attributes:
        storage_dir (str): Directory where the SQLite database is stored
        db_path (str): Full path to the SQLite database file
        table (str): Table holding the records
        columns (tuple): Attribute columns besides ``id``
    """

    def __init__(
        self,
        storage_dir: str,
        table: str = DEFAULT_TABLE,
        columns: Sequence[str] = (),
        filename: str = DEFAULT_DB,
    ):
        """
        Initialize SQLite record collection.

        Args:
            storage_dir: Directory for storing the SQLite database
            table: Table name
            columns: Attribute column names
            filename: Database file name

        Raises:
            ValueError: If the table or a column name is not a plain identifier
        """
        os.makedirs(storage_dir, exist_ok=True)
        self.storage_dir = storage_dir
        self.filename = filename
        self.db_path = os.path.join(storage_dir, filename)
        self.table = validate_identifier(table)
        self.columns = tuple(
            validate_identifier(column) for column in columns if column != ID_COLUMN
        )

    async def initialize(self) -> None:
        """
        Create the table if it doesn't exist.

        Raises:
            StorageError: If initialization fails
        """
        columns = "".join(f",\n    {column}" for column in self.columns)
        await initialize_table(self.db_path, TABLE_SCHEMA.format(table=self.table, columns=columns))
        logger.info(f"Initialized SQLite table {self.table}")

    async def backup(self, backup_dir: str) -> None:
        """Create a backup of the database in ``backup_dir``."""
        backup_database(self.db_path, backup_dir, self.filename)

    async def restore_from_backup(self, backup_dir: str) -> None:
        """Restore the database from a backup in ``backup_dir``."""
        restore_database(backup_dir, self.db_path, self.filename)

    def create(self, **attributes: Any) -> Record:
        """Build an unsaved record bound to this collection."""
        return Record(attributes, collection=self)

    def _check_columns(self, names: Sequence[str]) -> None:
        unknown = [name for name in names if name != ID_COLUMN and name not in self.columns]
        if unknown:
            raise QueryError(f"Unknown columns for {self.table}: {', '.join(unknown)}")

    async def save(self, record: Record) -> Record:
        """
        Insert or update a record.

        Records without an id are inserted and receive the generated id;
        records with an id replace the stored row.

        Args:
            record: Record to persist

        Returns:
            The saved record

        Raises:
            QueryError: If the record has attributes the table lacks
            RecordNotFoundError: If updating an id that is not stored
            StorageError: If the database operation fails
        """
        values = {key: value for key, value in record.to_dict().items() if key != ID_COLUMN}
        self._check_columns(list(values))
        record_id = record.get(ID_COLUMN)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                if record_id is None:
                    if values:
                        query = INSERT_RECORD.format(
                            table=self.table,
                            columns=", ".join(values),
                            placeholders=", ".join("?" for _ in values),
                        )
                        cursor = await db.execute(query, tuple(values.values()))
                    else:
                        cursor = await db.execute(INSERT_EMPTY_RECORD.format(table=self.table))
                    record.set(ID_COLUMN, cursor.lastrowid)
                else:
                    async with db.execute(
                        SELECT_ONE_BY_ID.format(table=self.table), (record_id,)
                    ) as cursor:
                        if not await cursor.fetchone():
                            raise RecordNotFoundError(f"Record not found: {record_id}")
                    if values:
                        query = UPDATE_RECORD.format(
                            table=self.table,
                            assignments=", ".join(f"{column} = ?" for column in values),
                        )
                        await db.execute(query, tuple(values.values()) + (record_id,))
                await db.commit()

            logger.debug(f"Saved record {record.get(ID_COLUMN)} to {self.table}")
            return record

        except RecordNotFoundError:
            raise
        except Exception as e:
            logger.error(f"Failed to save record: {str(e)}")
            raise StorageError(f"Failed to save record: {str(e)}")

    async def get(self, record_id: Any) -> Record:
        """
        Get a record by id.

        Raises:
            RecordNotFoundError: If no record has the id
            StorageError: If the database operation fails
        """
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                async with db.execute(SELECT_BY_ID.format(table=self.table), (record_id,)) as cursor:
                    row = await cursor.fetchone()
        except Exception as e:
            logger.error(f"Failed to get record: {str(e)}")
            raise StorageError(f"Failed to get record: {str(e)}")

        if not row:
            raise RecordNotFoundError(f"Record not found: {record_id}")
        return Record(row_to_dict(row), collection=self)

    async def fetch_one(
        self, where: Dict[str, Any], exclude_id: Any = None
    ) -> Optional[Record]:
        """
        Get the first record whose columns equal every value in ``where``.

        Args:
            where: Mapping of column name to value
            exclude_id: Id of a record to leave out of the match, if any

        Returns:
            Matching record with the lowest id, or None

        Raises:
            QueryError: If ``where`` is empty or names an unknown column
            StorageError: If the database operation fails
        """
        if not where:
            raise QueryError("fetch_one requires at least one filter")
        self._check_columns(list(where))

        conditions, params = build_conditions(where)
        if exclude_id is not None:
            conditions = f"{conditions} AND {ID_COLUMN} != ?"
            params.append(exclude_id)
        query = SELECT_WHERE.format(table=self.table, conditions=conditions)

        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                async with db.execute(query, params) as cursor:
                    row = await cursor.fetchone()
        except Exception as e:
            logger.error(f"Failed to query records: {str(e)}")
            raise StorageError(f"Failed to query records: {str(e)}")

        logger.debug(f"Lookup on {self.table} by {', '.join(where)}: {'hit' if row else 'miss'}")
        return Record(row_to_dict(row), collection=self) if row else None

    async def delete(self, record_id: Any) -> None:
        """
        Delete a record by id.

        Raises:
            RecordNotFoundError: If no record has the id
            StorageError: If the database operation fails
        """
        try:
            async with aiosqlite.connect(self.db_path) as db:
                async with db.execute(
                    SELECT_ONE_BY_ID.format(table=self.table), (record_id,)
                ) as cursor:
                    if not await cursor.fetchone():
                        raise RecordNotFoundError(f"Record not found: {record_id}")

                await db.execute(DELETE_RECORD.format(table=self.table), (record_id,))
                await db.commit()

        except RecordNotFoundError:
            raise
        except Exception as e:
            logger.error(f"Failed to delete record: {str(e)}")
            raise StorageError(f"Failed to delete record: {str(e)}")
