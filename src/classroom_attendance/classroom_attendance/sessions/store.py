from __future__ import annotations

import threading
from typing import Optional

from .model import ClassSession


class SessionStore:
    """Holder of the one live classroom session for the whole server.

    Starting a session replaces whatever was here; expired sessions are never
    swept, they just fail verification until superseded.
    """

    def __init__(self) -> None:
        self._current: Optional[ClassSession] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[ClassSession]:
        with self._lock:
            return self._current

    def replace(self, session: ClassSession) -> None:
        with self._lock:
            self._current = session
