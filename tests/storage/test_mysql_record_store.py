from __future__ import annotations

from shift_tracker.storage.mysql_store import MySQLRecordStore


class FakeCursor:
    def __init__(self, table: dict[str, str]):
        self._table = table
        self._row = None

    def execute(self, sql: str, params=()):
        if sql.lstrip().upper().startswith("SELECT"):
            value = self._table.get(params[0])
            self._row = {"record_value": value} if value is not None else None
        else:
            key, value = params
            self._table[key] = value

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table):
        self._table = table
        self.commits = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self._table)

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict[str, str] = {}
        self.connections: list[FakeConnection] = []

    def connect(self, *, with_database=True):
        conn = FakeConnection(self.table)
        self.connections.append(conn)
        return conn


def test_save_then_load_returns_equal_value():
    factory = FakeConnFactory()
    store = MySQLRecordStore(factory)
    value = [{"id": "a", "tags": ["busy"], "tips": 12.5}]

    store.save("bartending-shifts", value)

    assert store.load("bartending-shifts") == value
    assert factory.connections[0].commits == 1


def test_missing_key_or_bad_json_gives_default():
    factory = FakeConnFactory()
    store = MySQLRecordStore(factory)
    assert store.load("nope", []) == []

    factory.table["k"] = "{broken"
    assert store.load("k", "default") == "default"
