from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.classroom_attendance.classroom_attendance.core.enums import StorageBackend
from src.classroom_attendance.classroom_attendance.database.bootstrap import apply_schema, list_tables
from src.classroom_attendance.classroom_attendance.database.connection import DatabaseConnection, DBConfig
from src.classroom_attendance.classroom_attendance.storage.json_storage import JsonFileStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = StorageBackend(str(settings.STORAGE_BACKEND).lower())

    if backend is StorageBackend.MYSQL:
        db_config = DBConfig.from_mapping(settings.DB_CONFIG)
        conn_factory = DatabaseConnection.get_instance(db_config)
        apply_schema(conn_factory, schema_path=REPO_ROOT / "database" / "schema.sql")
        tables = list_tables(conn_factory)
        print(
            "OK: Applied schema.sql -> "
            f"{db_config.user}@{db_config.host}:{db_config.port}/{db_config.database} (tables={len(tables)})"
        )
        return

    storage = JsonFileStorage(settings.DATA_FILE)
    if storage.path.exists():
        snapshot = storage.load_all()
        print(f"OK: {storage.path} exists (attendance={len(snapshot.attendance)}, users={len(snapshot.users)})")
        return

    storage.path.parent.mkdir(parents=True, exist_ok=True)
    storage.path.write_text('{\n  "attendance": [],\n  "users": []\n}', encoding="utf-8")
    print(f"OK: Created empty document {storage.path}")


if __name__ == "__main__":
    main()
