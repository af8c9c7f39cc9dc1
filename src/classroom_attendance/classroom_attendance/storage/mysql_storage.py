from __future__ import annotations

import mysql.connector

from ..attendance.model import AttendanceRecord, Location
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..users.model import User
from .base import Storage, StorageSnapshot


class MySQLStorage(Storage):
    """Tables ``attendance`` and ``students`` from database/schema.sql.

    ``uq_attendance_daily`` backs the one-record-per-day rule at the database
    level; a violation surfaces as :class:`ConflictError`.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_all(self) -> StorageSnapshot:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, subject, marked_at, latitude, longitude
                FROM attendance
                ORDER BY attendance_id
                """
            )
            attendance = [
                AttendanceRecord(
                    student_id=r["student_id"],
                    subject=r["subject"],
                    timestamp=r["marked_at"],
                    location=Location(lat=float(r["latitude"]), lon=float(r["longitude"])),
                )
                for r in fetchall(cur)
            ]

            cur.execute("SELECT student_id, password_hash, is_legacy FROM students ORDER BY student_pk")
            users = [
                User(
                    student_id=r["student_id"],
                    password_hash=r["password_hash"],
                    legacy_plaintext=bool(r.get("is_legacy", False)),
                )
                for r in fetchall(cur)
            ]
        return StorageSnapshot(attendance=attendance, users=users)

    def append_record(self, record: AttendanceRecord) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(student_id, subject, attendance_date, marked_at, latitude, longitude)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        record.student_id,
                        record.subject,
                        record.day,
                        record.timestamp,
                        record.location.lat,
                        record.location.lon,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            raise ConflictError(f"Attendance already marked for {record.subject} today.") from e

    def upsert_user(self, user: User) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(student_id, password_hash, is_legacy)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash), is_legacy=VALUES(is_legacy)
                """,
                (user.student_id, user.password_hash, int(user.legacy_plaintext)),
            )
