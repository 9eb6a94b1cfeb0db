"""Tests for the JSON snapshot store."""

import json
import logging
from pathlib import Path

from fplist.core import FrequencyPriorityList
from fplist.schemas import Source
from fplist.storage import SnapshotStore


def test_missing_file_loads_nothing(tmp_path: Path) -> None:
    store = SnapshotStore(tmp_path / "missing.json")

    assert not store.exists()
    assert store.load() is None


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    store = SnapshotStore(tmp_path / "nested" / "dir" / "ranking.json")
    lst = FrequencyPriorityList([1, 2, 2])
    lst.add_to_manual(3)

    store.save(lst.snapshot())

    assert store.exists()
    payload = json.loads(store.path.read_text(encoding="utf-8"))
    assert payload["manual"] == {"element": 3, "count": 1}
    assert payload["automatic"] == [{"element": 2, "count": 2}, {"element": 1, "count": 1}]


def test_round_trip_with_typed_elements(tmp_path: Path) -> None:
    store = SnapshotStore(str(tmp_path / "sources.json"))
    lst = FrequencyPriorityList([Source(identifier="a.csv", label="A"), Source(identifier="b.csv")])
    store.save(lst.snapshot())

    snapshot = store.load(Source)

    assert snapshot is not None
    assert snapshot.elements() == [Source(identifier="b.csv"), Source(identifier="a.csv", label="A")]
    restored = FrequencyPriorityList.from_snapshot(snapshot)
    assert restored.to_list() == lst.to_list()


def test_invalid_json_is_ignored_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="fplist.storage")

    assert SnapshotStore(path).load() is None
    assert "not valid JSON" in caplog.text


def test_undecodable_file_is_ignored_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    caplog.set_level(logging.WARNING, logger="fplist.storage")

    assert SnapshotStore(path).load() is None
    assert "could not be read" in caplog.text


def test_unreadable_path_is_ignored_with_warning(tmp_path: Path, monkeypatch, caplog) -> None:
    path = tmp_path / "locked.json"
    path.write_text("{}", encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="fplist.storage")

    def refuse(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", refuse)

    assert SnapshotStore(path).load() is None
    assert "could not be read" in caplog.text


def test_schema_mismatch_is_ignored_with_warning(tmp_path: Path, caplog) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"automatic": [{"element": 1, "count": 0}]}), encoding="utf-8")
    caplog.set_level(logging.WARNING, logger="fplist.storage")

    assert SnapshotStore(path).load() is None
    assert "does not match" in caplog.text


def test_clear_removes_file(tmp_path: Path) -> None:
    store = SnapshotStore(tmp_path / "ranking.json")
    store.save(FrequencyPriorityList([1]).snapshot())

    store.clear()
    store.clear()

    assert not store.exists()
