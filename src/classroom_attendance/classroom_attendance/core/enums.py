from __future__ import annotations

from enum import Enum


class StorageBackend(str, Enum):
    """Where attendance records and student credentials are persisted."""

    JSON = "json"
    MYSQL = "mysql"
