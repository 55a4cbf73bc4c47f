from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .core.constants import DEFAULT_DATA_FILE, DEFAULT_HOURLY_RATE, STORAGE_KEY
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .earnings.service import StatisticsService
from .shifts.service import ShiftService
from .shifts.store_repository import RecordStoreShiftRepository
from .storage.json_store import JsonFileRecordStore
from .storage.memory_store import InMemoryRecordStore
from .storage.mysql_store import MySQLRecordStore
from .storage.record_store import RecordStore


@dataclass(frozen=True)
class Container:
    store: RecordStore
    shifts_repo: RecordStoreShiftRepository

    shift_service: ShiftService
    statistics_service: StatisticsService


def build_store(settings: ModuleType) -> RecordStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()

    if backend == "memory":
        return InMemoryRecordStore()

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn)
        return MySQLRecordStore(conn)

    if backend == "json":
        return JsonFileRecordStore(getattr(settings, "DATA_FILE", None) or DEFAULT_DATA_FILE)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(settings: ModuleType, *, store: RecordStore | None = None) -> Container:
    store = store or build_store(settings)

    shifts_repo = RecordStoreShiftRepository(store, key=getattr(settings, "STORAGE_KEY", STORAGE_KEY))
    statistics_service = StatisticsService()
    shift_service = ShiftService(
        shifts_repo,
        statistics=statistics_service,
        default_hourly_rate=float(getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE)),
    )

    return Container(
        store=store,
        shifts_repo=shifts_repo,
        shift_service=shift_service,
        statistics_service=statistics_service,
    )
