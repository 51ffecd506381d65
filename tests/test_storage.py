import sqlite3

import pytest

from buraq.storage import FileStore, OpenedFile, connect, default_db_path


@pytest.fixture
def store():
    s = FileStore(sqlite3.connect(":memory:"))
    s.init_db()
    yield s
    s.close()


def test_insert_returns_distinct_ids(store, tmp_path):
    first = store.insert_file(str(tmp_path / "a.ps1"), "a.ps1")
    second = store.insert_file(str(tmp_path / "b.ps1"), "b.ps1")
    assert isinstance(first, int) and isinstance(second, int)
    assert first != second


def test_duplicate_path_is_not_inserted(store, tmp_path):
    path = str(tmp_path / "a.ps1")
    assert store.insert_file(path, "a.ps1") is not None
    assert store.insert_file(path, "other") is None


def test_find_returns_existing_files(store, tmp_path):
    existing = tmp_path / "script.ps1"
    existing.write_text("Get-Date")
    row_id = store.insert_file(str(existing), "script.ps1")
    files = store.find_previously_opened_files()
    assert files == [OpenedFile(file_path=str(existing), file_name="script.ps1", id=row_id)]


def test_find_drops_missing_files(store, tmp_path):
    existing = tmp_path / "here.ps1"
    existing.write_text("")
    store.insert_file(str(existing), "here.ps1")
    store.insert_file(str(tmp_path / "gone.ps1"), "gone.ps1")
    files = store.find_previously_opened_files()
    assert [f.file_name for f in files] == ["here.ps1"]
    assert store.delete_row(str(tmp_path / "gone.ps1")) == 0


def test_delete_row(store, tmp_path):
    path = str(tmp_path / "x.ps1")
    store.insert_file(path, "x.ps1")
    assert store.delete_row(path) == 1
    assert store.insert_file(path, "x.ps1") is not None


def test_init_db_is_idempotent(store, tmp_path):
    store.insert_file(str(tmp_path / "k.ps1"), "k.ps1")
    store.init_db()
    assert store.delete_row(str(tmp_path / "k.ps1")) == 1


def test_connect_creates_database_and_persists(tmp_path):
    db = tmp_path / "data" / "itools.db"
    target = tmp_path / "keep.ps1"
    target.write_text("")
    with connect(db) as s:
        s.insert_file(str(target), "keep.ps1")
    assert db.exists()
    assert (db.parent / "log.txt").exists()
    with connect(db) as s:
        names = [f.file_name for f in s.find_previously_opened_files()]
    assert names == ["keep.ps1"]


def test_default_db_path_name():
    assert default_db_path().name == "itools.db"
    assert default_db_path().parent.name == ".data"