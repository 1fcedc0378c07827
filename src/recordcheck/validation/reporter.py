"""
Validation Reporter Components

This module formats validation results for output. It supports:
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict

from .base import ValidationResult


class ValidationReporter:
    """
    Reporter for formatting and outputting validation results.

    Provides static methods that render a ValidationResult for logs, API
    responses or test output.
    """

    @staticmethod
    def format_result(result: ValidationResult) -> str:
        """
        Format a validation result as a human-readable string.

        Args:
            result: ValidationResult instance to format

        Returns:
            str: Formatted string representation of the validation result

        Example:
            >>> result = ValidationResult(False, ["location is required"], [], None)
            >>> print(ValidationReporter.format_result(result))
            Validation failed with the following errors:
              - location is required
        """
        lines = []

        if not result.is_valid:
            lines.append("Validation failed with the following errors:")
            for error in result.errors:
                lines.append(f"  - {error}")

        if result.warnings:
            lines.append("\nWarnings:")
            for warning in result.warnings:
                lines.append(f"  - {warning}")

        if result.context:
            lines.append("\nContext:")
            for key, value in result.context.items():
                lines.append(f"  {key}: {value}")

        if not lines:
            lines.append("Validation passed successfully")

        return "\n".join(lines)

    @staticmethod
    def to_dict(result: ValidationResult) -> Dict[str, Any]:
        """Convert a validation result to a dictionary."""
        return {
            "is_valid": result.is_valid,
            "errors": list(result.errors),
            "warnings": list(result.warnings),
            "context": result.context,
        }

    @staticmethod
    def to_json(result: ValidationResult) -> str:
        """Convert a validation result to indented JSON."""
        return json.dumps(ValidationReporter.to_dict(result), indent=2, default=str)
