from types import SimpleNamespace

import pytest

from shift_tracker.container import build_container, build_store
from shift_tracker.storage.json_store import JsonFileRecordStore
from shift_tracker.storage.memory_store import InMemoryRecordStore


def test_memory_backend():
    settings = SimpleNamespace(STORAGE_BACKEND="memory", STORAGE_KEY="k", DEFAULT_HOURLY_RATE=18.0)

    container = build_container(settings)

    assert isinstance(container.store, InMemoryRecordStore)
    assert container.shift_service.new_shift().hourly_rate == 18.0


def test_json_backend_uses_data_file(tmp_path):
    settings = SimpleNamespace(STORAGE_BACKEND="json", DATA_FILE=str(tmp_path / "shifts.json"))

    store = build_store(settings)

    assert isinstance(store, JsonFileRecordStore)
    assert store.path == tmp_path / "shifts.json"


def test_unknown_backend():
    with pytest.raises(ValueError):
        build_store(SimpleNamespace(STORAGE_BACKEND="redis"))


def test_container_reads_existing_data(make_shift):
    store = InMemoryRecordStore()
    store.save("k", [make_shift().to_dict()])

    container = build_container(SimpleNamespace(STORAGE_KEY="k"), store=store)

    assert len(container.shifts_repo.list_all()) == 1
