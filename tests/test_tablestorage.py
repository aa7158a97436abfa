import os
import sys

import pytest

from einsteinpuzzle.table import TableError
from einsteinpuzzle.tablestorage import TableStorage, default_path


def test_default_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    if sys.platform == "win32":
        expected = "einstein.cfg"
    else:
        expected = os.path.join(str(tmp_path), ".einstein", "einsteinrc")
    assert default_path() == expected


def test_missing_file_and_directory_are_created(tmp_path):
    path = tmp_path / "conf" / "einsteinrc"
    storage = TableStorage(path)
    assert path.is_file()
    assert storage.get_int("missing", 7) == 7


def test_defaults_returned_for_unknown_names(tmp_path):
    storage = TableStorage(tmp_path / "rc")
    assert storage.get_string("lastName", "anon") == "anon"
    assert storage.get_int("top_score_0", -1) == -1


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "rc"
    storage = TableStorage(path)
    storage.set_int("volume", 20)
    storage.set_string("lastName", "Al \"B\"")
    storage.flush()

    reloaded = TableStorage(path)
    assert reloaded.get_int("volume", 0) == 20
    assert reloaded.get_string("lastName", "") == "Al \"B\""


def test_flush_writes_table_text(tmp_path):
    path = tmp_path / "rc"
    storage = TableStorage(path)
    storage.set_int("a", 5)
    storage.flush()
    assert path.read_text(encoding="utf-8") == "a = 5;\n"


def test_set_replaces_previous_value(tmp_path):
    storage = TableStorage(tmp_path / "rc")
    storage.set_int("x", 1)
    storage.set_int("x", 2)
    assert storage.get_int("x", 0) == 2


def test_context_manager_flushes(tmp_path):
    path = tmp_path / "rc"
    with TableStorage(path) as storage:
        storage.set_string("name", "zed")
    assert TableStorage(path).get_string("name", "") == "zed"


def test_corrupt_file_gives_empty_storage(tmp_path, capsys):
    path = tmp_path / "rc"
    path.write_text("a = { b = 1;", encoding="utf-8")
    storage = TableStorage(path)
    assert storage.get_int("a", 3) == 3
    assert "never finished" in capsys.readouterr().err


def test_non_numeric_string_as_int_raises(tmp_path):
    storage = TableStorage(tmp_path / "rc")
    storage.set_string("name", "abc")
    with pytest.raises(TableError):
        storage.get_int("name", 0)


def test_path_property(tmp_path):
    path = tmp_path / "rc"
    assert TableStorage(path).path == os.fspath(path)