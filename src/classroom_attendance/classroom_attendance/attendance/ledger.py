from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from ..storage.base import Storage
from .model import AttendanceRecord


class AttendanceLedger:
    """Append-only list of attendance records, written through to storage.

    The duplicate check and the append happen under one lock, so two requests
    for the same student/subject/day cannot both get in.
    """

    def __init__(self, storage: Storage, records: Iterable[AttendanceRecord] = ()):
        self._storage = storage
        self._records: list[AttendanceRecord] = list(records)
        self._lock = threading.Lock()

    def find_for_day(self, student_id: str, subject: str, day: str) -> Optional[AttendanceRecord]:
        for record in self._records:
            if record.student_id == student_id and record.subject == subject and record.timestamp.startswith(day):
                return record
        return None

    def append_if_absent(self, record: AttendanceRecord) -> bool:
        with self._lock:
            if self.find_for_day(record.student_id, record.subject, record.day):
                return False
            self._storage.append_record(record)
            self._records.append(record)
            return True

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(reversed(self._records))

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in reversed(self._records) if r.student_id == student_id]
