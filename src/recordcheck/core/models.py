"""
Core domain models for the record validation system.

This module provides:
- Record: a dict-backed attribute store bound to the collection it persists in
- RuleSpec: one resolved entry of a declarative rule map
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from .constants import ID_ATTRIBUTE
from .enums import RuleKind

if TYPE_CHECKING:
    from .types import RecordCollection


class Record:
    """
    Mutable key/value record.

    Records keep their attributes in a plain dictionary. Missing attributes read
    as None. A record created through a collection keeps a reference to it so
    that lookups such as uniqueness checks can query the same table.

    Attributes:
        attributes (Dict[str, Any]): Current attribute values
    """

    def __init__(
        self,
        attributes: Optional[Dict[str, Any]] = None,
        collection: Optional["RecordCollection"] = None,
    ):
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self._collection = collection

    def get(self, key: str) -> Any:
        return self.attributes.get(key)

    def set(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def collection(self) -> Optional["RecordCollection"]:
        """Collection this record belongs to, if any."""
        return self._collection

    @property
    def id(self) -> Any:
        return self.attributes.get(ID_ATTRIBUTE)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.attributes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self.attributes == other.attributes

    def __repr__(self) -> str:
        return f"Record({self.attributes!r})"


@dataclass(frozen=True)
class RuleSpec:
    """
    A single rule declared for an attribute.

    Attributes:
        attribute: Name of the attribute the rule checks
        kind: Which rule to run
        test_value: Rule argument (length bound, pattern, other attribute name)
        message: Custom failure message, or None for the default
        position: Declaration order within the rule map
    """

    attribute: str
    kind: RuleKind
    test_value: Any = None
    message: Optional[str] = None
    position: int = 0

    def __post_init__(self):
        if not isinstance(self.attribute, str) or not self.attribute:
            raise ValueError("attribute must be a non-empty string")
        if not isinstance(self.kind, RuleKind):
            raise TypeError("kind must be a RuleKind enum")
        if self.message is not None and not isinstance(self.message, str):
            raise TypeError("message must be a string")
