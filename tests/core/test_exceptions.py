"""
Tests for custom exceptions.
"""

from recordcheck.core.exceptions import ConfigurationError, StorageError, ValidationError


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("name is required")
    assert str(error) == "Validation Error: name is required"
    assert error.messages == ["name is required"]
    assert error.message == "name is required"


def test_validation_error_multiple_messages():
    """Test validation error carrying several messages keeps their order."""
    error = ValidationError(["location is required", "name must be unique"])
    assert error.messages == ["location is required", "name must be unique"]
    assert error.message == "location is required"
    assert str(error) == "Validation Error: location is required; name must be unique"


def test_validation_error_empty():
    """Test validation error without messages."""
    error = ValidationError([])
    assert error.messages == []
    assert error.message == ""


def test_validation_error_collaborator_messages():
    """Test storage failure text is kept apart from rule failures."""
    error = ValidationError(
        ["database is locked", "location is required"],
        collaborator_messages=["database is locked"],
    )
    assert error.messages == ["database is locked", "location is required"]
    assert error.collaborator_messages == ["database is locked"]
    assert ValidationError("name is required").collaborator_messages == []


def test_error_kinds_are_distinct():
    """Test configuration and storage errors are not validation failures."""
    assert not issubclass(ConfigurationError, ValidationError)
    assert not issubclass(StorageError, ValidationError)
