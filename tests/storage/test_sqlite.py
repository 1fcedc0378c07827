"""
Tests for the SQLite record collection.
"""

import pytest

from recordcheck.core.exceptions import QueryError, RecordNotFoundError, StorageError
from recordcheck.core.models import Record
from recordcheck.storage import SqliteRecordCollection

pytestmark = pytest.mark.timeout(10)


@pytest.mark.asyncio
async def test_save_assigns_id(collection):
    record = collection.create(name="name", location="New York")
    saved = await collection.save(record)

    assert saved is record
    assert record.id == 1
    assert record.collection() is collection


@pytest.mark.asyncio
async def test_get_round_trip(collection):
    record = await collection.save(collection.create(name="name", location="New York"))

    loaded = await collection.get(record.id)
    assert loaded.to_dict() == {"id": record.id, "name": "name", "location": "New York"}
    assert loaded.collection() is collection


@pytest.mark.asyncio
async def test_values_keep_their_type(tmp_path):
    scores = SqliteRecordCollection(str(tmp_path), table="scores", columns=("points",))
    await scores.initialize()
    record = await scores.save(scores.create(points=12))

    assert (await scores.get(record.id)).get("points") == 12


@pytest.mark.asyncio
async def test_update_existing(collection):
    record = await collection.save(collection.create(name="name"))
    record.set("location", "Boston")
    await collection.save(record)

    assert (await collection.get(record.id)).get("location") == "Boston"


@pytest.mark.asyncio
async def test_update_missing_record(collection):
    with pytest.raises(RecordNotFoundError):
        await collection.save(collection.create(id=42, name="name"))


@pytest.mark.asyncio
async def test_save_empty_record(collection):
    record = await collection.save(collection.create())
    assert record.id is not None


@pytest.mark.asyncio
async def test_save_unknown_column(collection):
    with pytest.raises(QueryError, match="colour"):
        await collection.save(collection.create(colour="red"))


@pytest.mark.asyncio
async def test_fetch_one(collection):
    first = await collection.save(collection.create(name="name", location="a"))
    await collection.save(collection.create(name="name", location="b"))

    found = await collection.fetch_one({"name": "name"})
    assert found.id == first.id
    assert await collection.fetch_one({"name": "missing"}) is None
    assert (await collection.fetch_one({"name": "name", "location": "b"})).get("location") == "b"


@pytest.mark.asyncio
async def test_fetch_one_excludes_id(collection):
    first = await collection.save(collection.create(name="name"))
    second = await collection.save(collection.create(name="name"))

    found = await collection.fetch_one({"name": "name"}, exclude_id=first.id)
    assert found.id == second.id
    assert await collection.fetch_one({"name": "name"}, exclude_id=None) is not None

    await collection.delete(second.id)
    assert await collection.fetch_one({"name": "name"}, exclude_id=first.id) is None


@pytest.mark.asyncio
async def test_saved_records_visible_to_new_instance(collection, tmp_path):
    record = await collection.save(collection.create(name="name"))

    reopened = SqliteRecordCollection(str(tmp_path), columns=("name", "location"))
    assert (await reopened.get(record.id)).get("name") == "name"

@pytest.mark.asyncio
async def test_fetch_one_null_filter(collection):
    record = await collection.save(collection.create(name="name"))
    found = await collection.fetch_one({"location": None})
    assert found.id == record.id


@pytest.mark.asyncio
async def test_fetch_one_rejects_bad_filters(collection):
    with pytest.raises(QueryError):
        await collection.fetch_one({})
    with pytest.raises(QueryError, match="Unknown columns"):
        await collection.fetch_one({"name; DROP TABLE models": "x"})


@pytest.mark.asyncio
async def test_delete(collection):
    record = await collection.save(collection.create(name="name"))
    await collection.delete(record.id)

    with pytest.raises(RecordNotFoundError):
        await collection.get(record.id)
    with pytest.raises(RecordNotFoundError):
        await collection.delete(record.id)


@pytest.mark.asyncio
async def test_uninitialized_table(tmp_path):
    models = SqliteRecordCollection(str(tmp_path), columns=("name",))
    with pytest.raises(StorageError, match="Failed to query records"):
        await models.fetch_one({"name": "x"})


@pytest.mark.asyncio
async def test_backup_and_restore(collection, tmp_path):
    backup_dir = tmp_path / "backup"
    backup_dir.mkdir()
    record = await collection.save(collection.create(name="kept"))
    await collection.backup(str(backup_dir))

    await collection.delete(record.id)
    await collection.restore_from_backup(str(backup_dir))

    assert (await collection.get(record.id)).get("name") == "kept"


def test_invalid_identifiers(tmp_path):
    with pytest.raises(ValueError, match="Invalid SQL identifier"):
        SqliteRecordCollection(str(tmp_path), table="models; --")
    with pytest.raises(ValueError, match="Invalid SQL identifier"):
        SqliteRecordCollection(str(tmp_path), columns=("bad name",))


def test_create_binds_record(tmp_path):
    models = SqliteRecordCollection(str(tmp_path), columns=("name",))
    record = models.create(name="x")
    assert isinstance(record, Record)
    assert record.collection() is models
