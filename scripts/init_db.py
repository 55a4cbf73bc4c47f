from __future__ import annotations

import importlib

from shift_tracker.config import get_settings_module
from shift_tracker.database.bootstrap import apply_schema, list_tables
from shift_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection.get_instance(config)

    apply_schema(conn)
    tables = list_tables(conn)
    print(
        "OK: Applied schema -> "
        f"{config.user}@{config.host}:{config.port}/{config.database} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
