from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Optional

from ..attendance.model import AttendanceRecord
from ..users.model import User
from .base import Storage, StorageSnapshot

logger = logging.getLogger(__name__)


class JsonFileStorage(Storage):
    """One JSON document ``{"attendance": [...], "users": [...]}`` rewritten in full on every change.

    The document is read once and cached; a missing or empty file counts as
    empty collections and is created on the first write. Every read-modify-write
    of the document holds one lock, whichever store triggered it.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._document: Optional[dict[str, Any]] = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> StorageSnapshot:
        with self._lock:
            doc = self._read()
        return StorageSnapshot(
            attendance=[AttendanceRecord.from_dict(r) for r in doc["attendance"]],
            users=[User.from_dict(u) for u in doc["users"]],
        )

    def append_record(self, record: AttendanceRecord) -> None:
        with self._lock:
            doc = self._read()
            self._write({**doc, "attendance": [*doc["attendance"], record.to_dict()]})

    def upsert_user(self, user: User) -> None:
        with self._lock:
            doc = self._read()
            users = list(doc["users"])
            for i, existing in enumerate(users):
                if existing.get("studentId") == user.student_id:
                    users[i] = user.to_dict()
                    break
            else:
                users.append(user.to_dict())
            self._write({**doc, "users": users})

    def _read(self) -> dict[str, Any]:
        if self._document is None:
            doc: dict[str, Any] = {}
            if self._path.exists():
                text = self._path.read_text(encoding="utf-8")
                if text.strip():
                    doc = json.loads(text)
            doc.setdefault("attendance", [])
            doc.setdefault("users", [])
            self._document = doc
            logger.debug(
                "Loaded %s (attendance=%d, users=%d)", self._path, len(doc["attendance"]), len(doc["users"])
            )
        return self._document

    def _write(self, document: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        os.replace(tmp_path, self._path)
        self._document = document
