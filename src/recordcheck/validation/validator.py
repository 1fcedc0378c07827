"""
Record validator.

This module implements the validator bound to a single record. It provides:
- Individual rule coroutines (required, match, min/max length, pattern, unique)
- Aggregate validation of a declarative rule map with all rules run concurrently
- A non-raising ``check`` variant that returns a ValidationResult

Every rule coroutine returns None when the rule passes and raises
``ValidationError`` carrying one message when it fails. Only ``unique`` performs
I/O; the other rules complete without suspending.

Example:
    >>> validator = Validator(record, {"name": {"required": True, "maxLength": 10}})
    >>> await validator.required("name")
    >>> await validator.validate()
"""

import asyncio
import logging
import math
import re
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from ..core.constants import ID_ATTRIBUTE
from ..core.enums import RuleKind
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.formatting import fmt
from ..core.models import RuleSpec
from ..core.types import Attributes, RecordCollection
from .base import ValidationResult
from .config import ValidatorConfig
from .ruleset import RuleSet

logger = logging.getLogger(__name__)

RuleMethod = Callable[[str, Any, Optional[str]], Awaitable[None]]


def is_falsy(value: Any) -> bool:
    """Check whether a value counts as absent: None, False, 0, NaN or empty."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def strictly_equal(left: Any, right: Any) -> bool:
    """
    Compare two attribute values without type coercion.

    Numbers compare by value regardless of int/float, but booleans only equal
    booleans and strings only equal strings. NaN never equals anything.
    """
    numeric = (int, float)
    if (
        isinstance(left, numeric)
        and isinstance(right, numeric)
        and not isinstance(left, bool)
        and not isinstance(right, bool)
    ):
        return left == right
    return type(left) is type(right) and left == right


def value_length(value: Any) -> Optional[int]:
    """Length of a value, or None for values without one."""
    if not hasattr(value, "__len__"):
        return None
    return len(value)


def length_bound(test_value: Any) -> Optional[float]:
    """Numeric length bound, or None when the rule was given no usable bound."""
    if isinstance(test_value, bool) or not isinstance(test_value, (int, float)):
        return None
    return test_value


class Validator:
    """
    Validator for the attributes of a single record.

    The validator holds a reference to the record and reads it at each rule
    call; it never writes to it. Rules given at construction are parsed
    immediately, so a misconfigured rule map fails before any validation runs.

    Attributes:
        record (Attributes): Record being validated
        rules (RuleSet): Declared rules used by validate()
        config (ValidatorConfig): Message templates and error policy
    """

    def __init__(
        self,
        record: Attributes,
        rules: Optional[Union[RuleSet, Dict[str, Dict[str, Any]]]] = None,
        config: Optional[ValidatorConfig] = None,
    ):
        """
        Initialize the validator.

        Args:
            record: Record exposing get/set
            rules: Rule map or prebuilt RuleSet for validate()
            config: Optional validator configuration

        Raises:
            ValueError: If no record is given
            ConfigurationError: If the rule map is invalid
        """
        if record is None:
            raise ValueError("Validator requires a record")

        self.record = record
        self.config = config or ValidatorConfig()
        if isinstance(rules, RuleSet):
            self.rules = rules
        else:
            self.rules = RuleSet.from_mapping(rules or {})

        self._rules: Dict[RuleKind, RuleMethod] = {
            RuleKind.REQUIRED: self.required,
            RuleKind.MATCH: self.match,
            RuleKind.MIN_LENGTH: self.min_length,
            RuleKind.MAX_LENGTH: self.max_length,
            RuleKind.PATTERN: self.pattern,
            RuleKind.UNIQUE: self.unique,
        }

    def _message(self, kind: RuleKind, message: Optional[str], *values: Any) -> str:
        if message:
            return message
        return fmt(self.config.template_for(kind), *values)

    async def required(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that an attribute is present.

        Tests truthiness only, so ``0``, ``""``, ``False``, NaN and empty
        collections all fail.

        Args:
            attribute: Attribute to check
            test_value: Unused; kept for a uniform rule signature
            message: Failure message to use instead of the default

        Raises:
            ValidationError: If the attribute is falsy
        """
        if is_falsy(self.record.get(attribute)):
            raise ValidationError(self._message(RuleKind.REQUIRED, message, attribute))

    async def match(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that an attribute equals another attribute.

        Two unset attributes match each other.

        Args:
            attribute: Attribute to check
            test_value: Name of the attribute to compare against
            message: Failure message to use instead of the default

        Raises:
            ValidationError: If the two values differ
        """
        value = self.record.get(attribute)
        other = self.record.get(test_value)

        if not strictly_equal(value, other):
            raise ValidationError(
                self._message(RuleKind.MATCH, message, attribute, test_value)
            )

    async def min_length(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that an attribute is at least ``test_value`` long.

        Falsy values pass; combine with ``required`` to reject empty values. A
        missing or non-numeric bound passes.

        Raises:
            ValidationError: If the value is shorter than the minimum
        """
        value = self.record.get(attribute)
        if is_falsy(value):
            return

        length = value_length(value)
        bound = length_bound(test_value)
        if length is not None and bound is not None and length < bound:
            raise ValidationError(
                self._message(RuleKind.MIN_LENGTH, message, attribute, test_value)
            )

    async def max_length(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that an attribute is at most ``test_value`` long.

        Falsy values pass, as does a missing or non-numeric bound.

        Raises:
            ValidationError: If the value is longer than the maximum
        """
        value = self.record.get(attribute)
        if is_falsy(value):
            return

        length = value_length(value)
        bound = length_bound(test_value)
        if length is not None and bound is not None and length > bound:
            raise ValidationError(
                self._message(RuleKind.MAX_LENGTH, message, attribute, test_value)
            )

    async def pattern(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that an attribute matches a regular expression.

        The pattern is searched for anywhere in the value; anchor it to match
        the whole value. Falsy values, and calls without a pattern, pass
        without being tested.

        Args:
            attribute: Attribute to check
            test_value: Pattern string or compiled pattern
            message: Failure message to use instead of the default

        Raises:
            ValidationError: If the value does not match
        """
        value = self.record.get(attribute)
        if is_falsy(value) or test_value is None:
            return

        if not re.search(test_value, str(value)):
            raise ValidationError(self._message(RuleKind.PATTERN, message, value, attribute))

    async def unique(
        self, attribute: str, test_value: Any = None, message: Optional[str] = None
    ) -> None:
        """
        Validate that no other persisted record has the same attribute value.

        Looks up the record's collection for another row with an equal value,
        leaving out the record's own row, so an update does not conflict with
        itself. A record without an id conflicts with any row found.
        Falsy values pass without querying.

        Args:
            attribute: Attribute to check
            test_value: Unused; kept for a uniform rule signature
            message: Failure message to use instead of the default

        Raises:
            ValidationError: If another record holds the value
            ConfigurationError: If no collection is available
            StorageError: If the lookup fails
        """
        value = self.record.get(attribute)
        if is_falsy(value):
            return

        collection = self._collection()
        record_id = self.record.get(ID_ATTRIBUTE)
        existing = await collection.fetch_one({attribute: value}, exclude_id=record_id)
        if existing is None:
            return

        if not strictly_equal(existing.get(ID_ATTRIBUTE), record_id):
            raise ValidationError(self._message(RuleKind.UNIQUE, message, attribute))

    def _collection(self) -> RecordCollection:
        if self.config.collection is not None:
            return self.config.collection

        accessor = getattr(self.record, "collection", None)
        collection = accessor() if callable(accessor) else None
        if collection is None:
            raise ConfigurationError("Record has no collection for uniqueness checks")
        return collection

    # Aliases matching the rule names used in rule maps
    minLength = min_length
    maxLength = max_length

    async def run_rule(self, spec: RuleSpec) -> None:
        """Run a single declared rule."""
        rule = self._rules[spec.kind]
        await rule(spec.attribute, spec.test_value, spec.message)

    async def _settle(self) -> List[Tuple[str, bool]]:
        """
        Run every declared rule concurrently and wait for all of them.

        Returns:
            Failure messages in declaration order, each paired with whether it
            came from a collected storage failure

        Raises:
            ConfigurationError: If a rule could not run as configured
            Exception: The first storage failure, when the config says to raise
        """
        specs = list(self.rules)
        if not specs:
            return []

        results = await asyncio.gather(
            *(self.run_rule(spec) for spec in specs), return_exceptions=True
        )

        failures: List[Tuple[str, bool]] = []
        collaborator_error: Optional[BaseException] = None
        for spec, result in zip(specs, results):
            if result is None:
                continue
            if isinstance(result, ValidationError):
                failures.extend((message, False) for message in result.messages)
            elif (
                isinstance(result, Exception)
                and not isinstance(result, ConfigurationError)
                and self.config.collaborator_errors == "collect"
            ):
                logger.warning(
                    f"Collected {spec.kind.value} failure on {spec.attribute}: {str(result)}"
                )
                failures.append((str(result), True))
            elif collaborator_error is None:
                collaborator_error = result

        logger.debug(f"Validated {len(specs)} rules, {len(failures)} failed")

        if collaborator_error is not None:
            raise collaborator_error
        return failures

    async def validate(self) -> None:
        """
        Run every declared rule and report all failures together.

        All rules are started before any is awaited and every one is allowed to
        finish; a failing rule never stops the others. Messages are reported in
        declaration order, not completion order.

        Raises:
            ValidationError: With every failure message, if any rule failed.
                Text of collected storage failures is also listed in its
                ``collaborator_messages``
            ConfigurationError: If a rule could not run as configured
            StorageError: If a lookup failed and the config says to raise
        """
        failures = await self._settle()
        if failures:
            messages = [message for message, _ in failures]
            from_storage = [message for message, collected in failures if collected]
            raise ValidationError(messages, collaborator_messages=from_storage)
        return None

    async def check(self) -> ValidationResult:
        """
        Run every declared rule and return the outcome instead of raising.

        Rule failures go to ``errors``; collected storage failures go to
        ``warnings``. Either makes the result invalid.

        Returns:
            ValidationResult listing failure messages in declaration order

        Raises:
            ConfigurationError: If a rule could not run as configured
            StorageError: If a lookup failed and the config says to raise
        """
        failures = await self._settle()

        return ValidationResult(
            is_valid=not failures,
            errors=[message for message, collected in failures if not collected],
            warnings=[message for message, collected in failures if collected],
            context={"validated_fields": self.rules.attributes},
        )
