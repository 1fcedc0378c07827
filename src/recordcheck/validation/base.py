"""
Validation result container.

``Validator.validate()`` reports failure by raising; ``ValidationResult`` is the
non-raising form returned by ``Validator.check()`` and consumed by the reporter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether every rule passed
        errors (List[str]): Failure messages in rule declaration order
        warnings (List[str]): Non-fatal notes, such as collected storage failures
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None
