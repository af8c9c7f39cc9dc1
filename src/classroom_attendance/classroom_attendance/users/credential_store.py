from __future__ import annotations

import threading
from typing import Iterable, Optional

from ..storage.base import Storage
from .model import User


class CredentialStore:
    """In-memory index of registered students, written through to storage."""

    def __init__(self, storage: Storage, users: Iterable[User] = ()):
        self._storage = storage
        self._by_id: dict[str, User] = {u.student_id: u for u in users}
        self._lock = threading.Lock()

    def get(self, student_id: str) -> Optional[User]:
        return self._by_id.get(student_id)

    def add_if_absent(self, user: User) -> bool:
        """Persist ``user`` unless the id is taken. Returns False on a duplicate."""
        with self._lock:
            if user.student_id in self._by_id:
                return False
            self._storage.upsert_user(user)
            self._by_id[user.student_id] = user
            return True
