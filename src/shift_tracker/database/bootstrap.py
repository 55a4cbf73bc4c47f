from __future__ import annotations

from .connection import DatabaseConnection
from .mysql_base import db_cursor

RECORD_STORE_TABLE = "record_store"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS `{RECORD_STORE_TABLE}` (
    record_key VARCHAR(191) NOT NULL PRIMARY KEY,
    record_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    with db_cursor(conn_factory, dictionary=False, with_database=False) as (_, cur):
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the database and the key/value table (idempotent)."""
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(SCHEMA_SQL)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
