from __future__ import annotations

import json
from typing import Any

from ..database.bootstrap import RECORD_STORE_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .record_store import RecordStore


class MySQLRecordStore(RecordStore):
    """Key/value rows in the ``record_store`` table, values stored as JSON text."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, key: str, default: Any = None) -> Any:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT record_value FROM `{RECORD_STORE_TABLE}` WHERE record_key=%s",
                (key,),
            )
            r = fetchone(cur)
        if not r:
            return default
        try:
            return json.loads(r["record_value"])
        except (TypeError, ValueError):
            return default

    def save(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO `{RECORD_STORE_TABLE}`(record_key, record_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE record_value=VALUES(record_value)
                """,
                (key, payload),
            )
