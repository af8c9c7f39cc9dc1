from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_utc, to_iso_instant
from ..common.validators import require_coordinate, require_non_empty
from ..core.exceptions import AuthorizationError, ConflictError, ValidationError
from ..geo.geofence import Geofence
from ..sessions.service import SessionService
from .ledger import AttendanceLedger
from .model import AttendanceRecord, Location

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, ledger: AttendanceLedger, sessions: SessionService, geofence: Geofence):
        self._ledger = ledger
        self._sessions = sessions
        self._geofence = geofence

    def mark_attendance(self, *, student_id, latitude, longitude, token, now: datetime | None = None) -> str:
        """Record the student for the live session's subject and return that subject.

        Order of checks: live session, input shape, geofence, same-day duplicate.
        """
        now = now or now_utc()

        session = self._sessions.require_active(token, now=now)
        subject = session.subject

        student_id = require_non_empty(student_id, "Student ID")
        lat = require_coordinate(latitude, "Latitude")
        lon = require_coordinate(longitude, "Longitude")

        is_within, distance = self._geofence.check(lat, lon)
        if not is_within:
            logger.warning("Rejected %s for %s: %.0fm from classroom", student_id, subject, distance)
            raise AuthorizationError(f"You are too far away. Distance: {distance:.0f}m")

        record = AttendanceRecord(
            student_id=student_id,
            subject=subject,
            timestamp=to_iso_instant(now),
            location=Location(lat=lat, lon=lon),
        )
        if not self._ledger.append_if_absent(record):
            logger.warning("Duplicate attendance for %s / %s on %s", student_id, subject, record.day)
            raise ConflictError(f"Attendance already marked for {subject} today.")

        logger.info("Attendance marked: %s / %s", student_id, subject)
        return subject

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._ledger.list_all()

    def list_for_student(self, student_id) -> Sequence[AttendanceRecord]:
        if not student_id:
            raise ValidationError("Student ID is required.")
        return self._ledger.list_for_student(str(student_id))
