"""
Rule Set Components for declarative validation

This module turns a declarative rule map into an ordered collection of rules.
A rule map looks like::

    {
        "location": {"required": True},
        "name": {
            "pattern": r"^name-",
            "maxLength": {"testValue": 10, "message": "name must be less than 11 characters long"},
        },
    }

Each rule entry is either a raw test value or a structured pair carrying
``testValue`` and an optional ``message``. The map's shape is checked against a
JSON schema before any rule is built, so unknown rule names and malformed pairs
are reported as configuration errors up front.
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..core.enums import RULE_NAMES, RuleKind
from ..core.exceptions import ConfigurationError
from ..core.models import RuleSpec

logger = logging.getLogger(__name__)

STRUCTURED_KEYS = ("testValue", "test_value", "message")

RULE_MAP_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "propertyNames": {"type": "string", "minLength": 1},
    "additionalProperties": {
        "type": "object",
        "propertyNames": {"enum": list(RULE_NAMES)},
        "additionalProperties": {
            "if": {"type": "object"},
            "then": {
                "properties": {"message": {"type": ["string", "null"]}},
                "propertyNames": {"enum": list(STRUCTURED_KEYS)},
                "not": {"required": ["testValue", "test_value"]},
            },
        },
    },
}


def resolve_entry(entry: Any) -> Tuple[Any, Optional[str]]:
    """
    Resolve a rule map entry to a (test value, message) pair.

    Args:
        entry: Raw test value or structured ``{"testValue", "message"}`` pair

    Returns:
        Tuple of test value and custom message (None when not given)
    """
    if isinstance(entry, dict):
        test_value = entry.get("testValue", entry.get("test_value"))
        return test_value, entry.get("message")
    return entry, None


class RuleSet:
    """
    Ordered collection of rules keyed by attribute.

    Rules keep the order in which they were added; for a rule set built from a
    mapping that is attribute order, then rule order within each attribute.

    Attributes:
        specs (List[RuleSpec]): Rules in declaration order
    """

    def __init__(self):
        self.specs: List[RuleSpec] = []

    @classmethod
    def from_mapping(cls, rules: Dict[str, Dict[str, Any]]) -> "RuleSet":
        """
        Build a rule set from a declarative rule map.

        Args:
            rules: Mapping of attribute name to mapping of rule name to entry

        Returns:
            RuleSet holding every declared rule

        Raises:
            ConfigurationError: If the map names an unknown rule or holds a
                malformed entry
        """
        try:
            json_validate(instance=rules, schema=RULE_MAP_SCHEMA)
        except JsonSchemaError as e:
            location = "/".join(str(part) for part in e.absolute_path) or "<root>"
            raise ConfigurationError(f"Invalid rule map at {location}: {e.message}")

        rule_set = cls()
        for attribute, declared in rules.items():
            for name, entry in declared.items():
                test_value, message = resolve_entry(entry)
                rule_set.add_rule(attribute, name, test_value, message)

        logger.debug(f"Built rule set with {len(rule_set)} rules")
        return rule_set

    def add_rule(
        self,
        attribute: str,
        rule: Union[RuleKind, str],
        test_value: Any = None,
        message: Optional[str] = None,
    ) -> RuleSpec:
        """
        Add a rule for an attribute.

        Args:
            attribute: Attribute to check
            rule: Rule kind or rule name
            test_value: Rule argument
            message: Custom failure message

        Returns:
            The added rule

        Raises:
            ConfigurationError: If the rule is unknown or its test value is unusable
        """
        kind = rule if isinstance(rule, RuleKind) else RuleKind.from_name(rule)
        if kind is None:
            raise ConfigurationError(f"Unknown validation rule: {rule}")

        self._check_test_value(attribute, kind, test_value)

        try:
            spec = RuleSpec(
                attribute=attribute,
                kind=kind,
                test_value=test_value,
                message=message,
                position=len(self.specs),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid rule for {attribute}: {str(e)}")

        self.specs.append(spec)
        return spec

    def _check_test_value(self, attribute: str, kind: RuleKind, test_value: Any) -> None:
        if kind in (RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH):
            if isinstance(test_value, bool) or not isinstance(test_value, (int, float)):
                raise ConfigurationError(
                    f"{kind.value} for {attribute} needs a numeric length, got {test_value!r}"
                )
        elif kind == RuleKind.MATCH:
            if not isinstance(test_value, str) or not test_value:
                raise ConfigurationError(
                    f"match for {attribute} needs the name of another attribute"
                )
        elif kind == RuleKind.PATTERN:
            if isinstance(test_value, re.Pattern):
                return
            if not isinstance(test_value, str):
                raise ConfigurationError(
                    f"pattern for {attribute} needs a regular expression, got {test_value!r}"
                )
            try:
                re.compile(test_value)
            except re.error as e:
                raise ConfigurationError(f"Invalid pattern for {attribute}: {str(e)}")

    @property
    def attributes(self) -> List[str]:
        """Attribute names in first-declared order."""
        return list(dict.fromkeys(spec.attribute for spec in self.specs))

    def __iter__(self) -> Iterator[RuleSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)
