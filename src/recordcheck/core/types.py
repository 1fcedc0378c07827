"""
Core type definitions and protocols.

The validator depends only on these narrow protocols, never on a concrete record
or storage class, so any object with a compatible ``get``/``set`` interface can
be validated.
"""

from typing import Any, Dict, Optional, Protocol


class Attributes(Protocol):
    """Protocol for a mutable key/value attribute store."""

    def get(self, key: str) -> Any:
        """Get the current value of an attribute, or None if unset."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Set an attribute value."""
        ...


class RecordCollection(Protocol):
    """Protocol for the persisted collection a record belongs to."""

    async def fetch_one(
        self, where: Dict[str, Any], exclude_id: Any = None
    ) -> Optional[Attributes]:
        """Return the first persisted record matching every filter, or None.

        A record whose id equals ``exclude_id`` is never returned.
        """
        ...
