import json

from shift_tracker.storage.json_store import JsonFileRecordStore
from shift_tracker.storage.memory_store import InMemoryRecordStore


def test_json_store_round_trip_and_reload(tmp_path):
    path = tmp_path / "nested" / "shifts.json"
    value = [{"id": "a", "tags": ["x"], "tips": 1.5}]

    JsonFileRecordStore(path).save("k", value)

    assert JsonFileRecordStore(path).load("k") == value
    assert not (path.parent / "shifts.json.tmp").exists()


def test_json_store_keeps_other_keys(tmp_path):
    store = JsonFileRecordStore(tmp_path / "s.json")
    store.save("a", 1)
    store.save("b", 2)
    assert (store.load("a"), store.load("b")) == (1, 2)


def test_json_store_missing_or_corrupt_file_gives_default(tmp_path):
    path = tmp_path / "s.json"
    assert JsonFileRecordStore(path).load("k", []) == []

    path.write_text("{not json", encoding="utf-8")
    assert JsonFileRecordStore(path).load("k", []) == []

    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    assert JsonFileRecordStore(path).load("k", "d") == "d"


def test_memory_store_returns_copies():
    store = InMemoryRecordStore()
    value = {"a": [1, 2]}
    store.save("k", value)
    value["a"].append(3)

    loaded = store.load("k")
    assert loaded == {"a": [1, 2]}
    loaded["a"].append(4)
    assert store.load("k") == {"a": [1, 2]}
