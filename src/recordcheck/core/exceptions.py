"""
Custom exceptions for the record validation system.

This module defines the hierarchy of custom exceptions used throughout the package
to separate expected validation failures from configuration mistakes and
infrastructure problems. Each exception type corresponds to a specific category of
errors that callers may want to handle differently.
"""

from typing import List, Sequence, Union


class ValidationError(Exception):
    """
    Raised when a record fails one or more validation rules.

    A single rule raises this exception with one message. The aggregate
    ``Validator.validate()`` raises it with every collected message, ordered as
    the rules were declared.

    Attributes:
        messages (List[str]): Failure messages, one per failed rule
        collaborator_messages (List[str]): Messages in ``messages`` that came
            from collected storage failures rather than failed rules

    Examples:
        * Missing required attribute
        * Value shorter than the minimum length
        * Duplicate value for a unique attribute
    """

    def __init__(
        self,
        messages: Union[str, Sequence[str]],
        collaborator_messages: Sequence[str] = (),
    ):
        if isinstance(messages, str):
            messages = [messages]
        self.messages: List[str] = list(messages)
        self.collaborator_messages: List[str] = list(collaborator_messages)
        super().__init__("; ".join(self.messages))

    @property
    def message(self) -> str:
        """First failure message."""
        return self.messages[0] if self.messages else ""

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when validator configuration is invalid.

    This exception is raised for programming mistakes in how validation is set
    up, never for bad record data.

    Examples:
        * Unknown rule name in a rule map
        * Structured rule entry without a test value
        * ``unique`` check on a record with no collection
    """


class StorageError(Exception):
    """
    Raised when storage operations fail.

    This exception is raised when operations involving data persistence encounter
    errors, such as database connection issues, file system errors, or storage
    constraint violations.

    Examples:
        * Database connection failures
        * File system access errors
        * Malformed table definitions
    """


class QueryError(Exception):
    """
    Raised when query operations fail.

    This exception is raised when a lookup is built from invalid parameters,
    such as a filter on a column the collection does not have.

    Examples:
        * Unknown filter column
        * Empty filter
    """


class RecordNotFoundError(Exception):
    """
    Raised when a requested record is not found.

    Examples:
        * Record lookup by non-existent id
        * Record deletion for non-existent id
    """
