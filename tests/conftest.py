"""Shared test fixtures."""

import pytest
import pytest_asyncio

from recordcheck.core.models import Record
from recordcheck.storage import SqliteRecordCollection
from recordcheck.validation import Validator

MODEL_RULES = {
    "location": {"required": True},
    "name": {
        "pattern": r"^name-",
        "maxLength": {
            "testValue": 10,
            "message": "name must be less than 11 characters long",
        },
    },
}


@pytest.fixture
def record() -> Record:
    """Fixture providing an empty unsaved record."""
    return Record()


@pytest.fixture
def validator(record) -> Validator:
    """Fixture providing a validator bound to the empty record."""
    return Validator(record)


@pytest.fixture
def model_rules():
    """Fixture providing the rule map declared for the models table."""
    return MODEL_RULES


@pytest_asyncio.fixture
async def collection(tmp_path) -> SqliteRecordCollection:
    """Fixture providing an initialized SQLite collection of models."""
    models = SqliteRecordCollection(str(tmp_path), columns=("name", "location"))
    await models.initialize()
    return models
