from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..attendance.model import AttendanceRecord
from ..users.model import User


@dataclass(frozen=True)
class StorageSnapshot:
    """Everything a backend holds, in insertion order."""

    attendance: list[AttendanceRecord] = field(default_factory=list)
    users: list[User] = field(default_factory=list)


class Storage(Protocol):
    """Persistence interface for the ledger and the credential store.

    Note (DIP): the in-memory stores depend on this interface, not on a
    concrete backend; writes must be complete when a method returns.
    """

    def load_all(self) -> StorageSnapshot:
        raise NotImplementedError

    def append_record(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def upsert_user(self, user: User) -> None:
        raise NotImplementedError
