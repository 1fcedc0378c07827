"""
Tests for validation result reporting.
"""

import json

from recordcheck.validation import ValidationReporter, ValidationResult


def test_format_failed_result():
    result = ValidationResult(
        is_valid=False,
        errors=["location is required", "name must be unique"],
        context={"validated_fields": ["location", "name"]},
    )

    assert ValidationReporter.format_result(result) == (
        "Validation failed with the following errors:\n"
        "  - location is required\n"
        "  - name must be unique\n"
        "\nContext:\n"
        "  validated_fields: ['location', 'name']"
    )


def test_format_passed_result():
    result = ValidationResult(is_valid=True)
    assert ValidationReporter.format_result(result) == "Validation passed successfully"


def test_format_warnings():
    result = ValidationResult(is_valid=True, warnings=["lookup skipped"])
    assert "Warnings:\n  - lookup skipped" in ValidationReporter.format_result(result)


def test_to_dict_and_json():
    result = ValidationResult(is_valid=False, errors=["name is required"])

    assert ValidationReporter.to_dict(result) == {
        "is_valid": False,
        "errors": ["name is required"],
        "warnings": [],
        "context": None,
    }
    assert json.loads(ValidationReporter.to_json(result)) == ValidationReporter.to_dict(result)
