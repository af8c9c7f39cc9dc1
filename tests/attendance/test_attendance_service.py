from __future__ import annotations

from datetime import timedelta
from math import degrees

import pytest

from src.classroom_attendance.classroom_attendance.attendance.ledger import AttendanceLedger
from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceRecord, Location
from src.classroom_attendance.classroom_attendance.attendance.service import AttendanceService
from src.classroom_attendance.classroom_attendance.core.constants import EARTH_RADIUS_M
from src.classroom_attendance.classroom_attendance.core.exceptions import (
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from src.classroom_attendance.classroom_attendance.geo.geofence import Geofence
from src.classroom_attendance.classroom_attendance.sessions.service import SessionService
from src.classroom_attendance.classroom_attendance.sessions.store import SessionStore

LAT, LON = 18.4725, 74.0015


class InMemoryStorage:
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    def load_all(self):
        raise NotImplementedError

    def append_record(self, record) -> None:
        self.records.append(record)

    def upsert_user(self, user) -> None:
        raise NotImplementedError


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def sessions():
    return SessionService(SessionStore())


@pytest.fixture
def svc(storage, sessions):
    return AttendanceService(AttendanceLedger(storage), sessions, Geofence(LAT, LON, 50))


def test_mark_attendance_appends_and_persists(svc, sessions, storage, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token

    subject = svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now)

    assert subject == "Math"
    assert len(storage.records) == 1
    rec = storage.records[0]
    assert rec.student_id == "S1"
    assert rec.subject == "Math"
    assert rec.timestamp == "2026-02-02T08:30:00.000Z"
    assert rec.location == Location(lat=LAT, lon=LON)


def test_same_subject_twice_same_day_conflicts(svc, sessions, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now)

    with pytest.raises(ConflictError, match="Attendance already marked for Math today."):
        svc.mark_attendance(
            student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now + timedelta(minutes=1)
        )


def test_different_subjects_same_day_both_succeed(svc, sessions, storage, fixed_now):
    math = sessions.start_session("Math", now=fixed_now).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=math, now=fixed_now)

    later = fixed_now + timedelta(hours=1)
    physics = sessions.start_session("Physics", now=later).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=physics, now=later)

    assert [r.subject for r in storage.records] == ["Math", "Physics"]


def test_same_subject_next_day_succeeds(svc, sessions, storage, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now)

    tomorrow = fixed_now + timedelta(days=1)
    token = sessions.start_session("Math", now=tomorrow).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=token, now=tomorrow)

    assert len(storage.records) == 2


def test_other_student_same_subject_succeeds(svc, sessions, storage, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token
    svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now)
    svc.mark_attendance(student_id="S2", latitude=LAT, longitude=LON, token=token, now=fixed_now)

    assert len(storage.records) == 2


def test_far_away_is_forbidden_with_distance(svc, sessions, storage, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token
    far_lat = LAT + degrees(1000 / EARTH_RADIUS_M)

    with pytest.raises(AuthorizationError) as exc:
        svc.mark_attendance(student_id="S1", latitude=far_lat, longitude=LON, token=token, now=fixed_now)

    assert str(exc.value) == "You are too far away. Distance: 1000m"
    assert storage.records == []


def test_expired_session_is_forbidden(svc, sessions, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token

    with pytest.raises(AuthorizationError, match="Invalid or expired session."):
        svc.mark_attendance(
            student_id="S1", latitude=LAT, longitude=LON, token=token, now=fixed_now + timedelta(minutes=6)
        )


def test_wrong_token_is_forbidden(svc, sessions, fixed_now):
    sessions.start_session("Math", now=fixed_now)

    with pytest.raises(AuthorizationError, match="Invalid or expired session."):
        svc.mark_attendance(student_id="S1", latitude=LAT, longitude=LON, token="bad", now=fixed_now)


@pytest.mark.parametrize(
    "student_id, latitude, longitude",
    [("", LAT, LON), ("S1", None, LON), ("S1", LAT, "north"), ("S1", True, LON)],
)
def test_bad_input_is_rejected_after_session_check(svc, sessions, fixed_now, student_id, latitude, longitude):
    token = sessions.start_session("Math", now=fixed_now).token

    with pytest.raises(ValidationError):
        svc.mark_attendance(student_id=student_id, latitude=latitude, longitude=longitude, token=token, now=fixed_now)


def test_listing_is_newest_first(svc, sessions, fixed_now):
    token = sessions.start_session("Math", now=fixed_now).token
    for i, sid in enumerate(["S1", "S2", "S1b"]):
        svc.mark_attendance(
            student_id=sid, latitude=LAT, longitude=LON, token=token, now=fixed_now + timedelta(seconds=i)
        )

    assert [r.student_id for r in svc.list_all()] == ["S1b", "S2", "S1"]
    assert [r.student_id for r in svc.list_for_student("S2")] == ["S2"]


def test_list_for_student_requires_id(svc):
    with pytest.raises(ValidationError):
        svc.list_for_student("")
