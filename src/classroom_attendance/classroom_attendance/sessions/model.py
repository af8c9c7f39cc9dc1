from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClassSession:
    """A teacher-initiated attendance window for one subject."""

    token: str
    subject: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
