"""
Configuration for the validator.

This module defines the knobs a caller can turn without subclassing:
- Overriding default message templates per rule
- Choosing how storage failures inside ``validate()`` are reported
- Supplying the collection used for uniqueness checks
"""

from typing import TYPE_CHECKING, Dict, Literal, Optional, Union, get_args

from ..core.constants import DEFAULT_MESSAGES
from ..core.enums import RuleKind
from ..core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..core.types import RecordCollection

CollaboratorErrorPolicy = Literal["raise", "collect"]


class ValidatorConfig:
    """
    Configuration for a Validator.

    Attributes:
        messages: Default message template per rule kind
        collaborator_errors: "raise" to re-raise storage failures from
            ``validate()`` once every rule has settled, "collect" to report
            their text alongside the validation messages
        collection: Collection for uniqueness checks, overriding the record's own
    """

    def __init__(
        self,
        messages: Optional[Dict[Union[RuleKind, str], str]] = None,
        collaborator_errors: CollaboratorErrorPolicy = "raise",
        collection: Optional["RecordCollection"] = None,
    ):
        if collaborator_errors not in get_args(CollaboratorErrorPolicy):
            raise ConfigurationError(
                f"Unsupported collaborator error policy: {collaborator_errors}"
            )

        self.messages: Dict[RuleKind, str] = dict(DEFAULT_MESSAGES)
        for name, template in (messages or {}).items():
            kind = name if isinstance(name, RuleKind) else RuleKind.from_name(name)
            if kind is None:
                raise ConfigurationError(f"Unknown rule for message template: {name}")
            self.messages[kind] = template

        self.collaborator_errors = collaborator_errors
        self.collection = collection

    def template_for(self, kind: RuleKind) -> str:
        return self.messages[kind]
