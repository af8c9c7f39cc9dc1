from __future__ import annotations

import mysql.connector
import pytest

from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceRecord, Location
from src.classroom_attendance.classroom_attendance.core.exceptions import ConflictError
from src.classroom_attendance.classroom_attendance.database.bootstrap import iter_sql_statements
from src.classroom_attendance.classroom_attendance.storage.mysql_storage import MySQLStorage
from src.classroom_attendance.classroom_attendance.users.model import User


class FakeCursor:
    def __init__(self, results, fail_with=None):
        self._results = list(results)
        self._fail_with = fail_with
        self.executed = []

    def execute(self, sql, params=None):
        if self._fail_with is not None:
            raise self._fail_with
        self.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self._results.pop(0)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, cursor):
        self.conn = FakeConnection(cursor)

    def connect(self, *, with_database=True):
        return self.conn


def test_load_all_maps_rows():
    cursor = FakeCursor(
        [
            [
                {
                    "student_id": "S1",
                    "subject": "Math",
                    "marked_at": "2026-02-02T08:30:00.000Z",
                    "latitude": 18.4725,
                    "longitude": 74.0015,
                }
            ],
            [{"student_id": "S1", "password_hash": "h", "is_legacy": 0}],
        ]
    )

    snapshot = MySQLStorage(FakeConnFactory(cursor)).load_all()

    assert snapshot.attendance[0].day == "2026-02-02"
    assert snapshot.attendance[0].location == Location(lat=18.4725, lon=74.0015)
    assert snapshot.users == [User(student_id="S1", password_hash="h")]


def test_append_record_stores_day_column():
    cursor = FakeCursor([])
    factory = FakeConnFactory(cursor)
    record = AttendanceRecord("S1", "Math", "2026-02-02T08:30:00.000Z", Location(1.0, 2.0))

    MySQLStorage(factory).append_record(record)

    sql, params = cursor.executed[0]
    assert sql.startswith("INSERT INTO attendance")
    assert params == ("S1", "Math", "2026-02-02", "2026-02-02T08:30:00.000Z", 1.0, 2.0)
    assert factory.conn.committed


def test_duplicate_key_becomes_conflict():
    cursor = FakeCursor([], fail_with=mysql.connector.IntegrityError(msg="Duplicate entry"))
    factory = FakeConnFactory(cursor)
    record = AttendanceRecord("S1", "Math", "2026-02-02T08:30:00.000Z", Location(1.0, 2.0))

    with pytest.raises(ConflictError, match="Attendance already marked for Math today."):
        MySQLStorage(factory).append_record(record)
    assert factory.conn.rolled_back


def test_sql_splitter_ignores_semicolons_in_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        "SELECT 1",
    ]
