from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.ledger import AttendanceLedger
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_ALLOWED_RADIUS_METERS,
    DEFAULT_CLASSROOM_LAT,
    DEFAULT_CLASSROOM_LON,
    DEFAULT_TOKEN_VALIDITY_MINUTES,
)
from .core.enums import StorageBackend
from .database.connection import DatabaseConnection, DBConfig
from .geo.geofence import Geofence
from .sessions.service import SessionService
from .sessions.store import SessionStore
from .storage.base import Storage
from .storage.json_storage import JsonFileStorage
from .storage.mysql_storage import MySQLStorage
from .users.credential_store import CredentialStore
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    storage: Storage
    session_store: SessionStore
    ledger: AttendanceLedger
    credentials: CredentialStore
    geofence: Geofence

    session_service: SessionService
    attendance_service: AttendanceService
    auth_service: AuthService


def build_storage(settings: Mapping[str, Any]) -> Storage:
    backend = StorageBackend(str(settings.get("STORAGE_BACKEND", StorageBackend.JSON.value)).lower())
    if backend is StorageBackend.MYSQL:
        return MySQLStorage(DatabaseConnection.get_instance(DBConfig.from_mapping(settings["DB_CONFIG"])))
    return JsonFileStorage(settings["DATA_FILE"])


def build_container(settings: Mapping[str, Any], *, storage: Optional[Storage] = None) -> Container:
    storage = storage or build_storage(settings)
    snapshot = storage.load_all()

    session_store = SessionStore()
    ledger = AttendanceLedger(storage, snapshot.attendance)
    credentials = CredentialStore(storage, snapshot.users)
    geofence = Geofence(
        latitude=float(settings.get("CLASSROOM_LAT", DEFAULT_CLASSROOM_LAT)),
        longitude=float(settings.get("CLASSROOM_LON", DEFAULT_CLASSROOM_LON)),
        radius_m=float(settings.get("ALLOWED_RADIUS_METERS", DEFAULT_ALLOWED_RADIUS_METERS)),
    )

    session_service = SessionService(
        session_store,
        validity_minutes=int(settings.get("TOKEN_VALIDITY_MINUTES", DEFAULT_TOKEN_VALIDITY_MINUTES)),
    )
    attendance_service = AttendanceService(ledger, session_service, geofence)
    auth_service = AuthService(credentials)

    return Container(
        storage=storage,
        session_store=session_store,
        ledger=ledger,
        credentials=credentials,
        geofence=geofence,
        session_service=session_service,
        attendance_service=attendance_service,
        auth_service=auth_service,
    )
