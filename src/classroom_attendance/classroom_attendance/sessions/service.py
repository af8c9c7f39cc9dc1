from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_TOKEN_VALIDITY_MINUTES, SESSION_TOKEN_BYTES
from ..core.exceptions import AuthorizationError, SessionExpiredError, SessionNotFoundError
from .model import ClassSession
from .store import SessionStore

logger = logging.getLogger(__name__)


def _new_token() -> str:
    return secrets.token_hex(SESSION_TOKEN_BYTES)


class SessionService:
    """Use case: open a classroom session and check tokens against it."""

    def __init__(
        self,
        store: SessionStore,
        *,
        validity_minutes: int = DEFAULT_TOKEN_VALIDITY_MINUTES,
        token_factory: Callable[[], str] | None = None,
    ):
        self._store = store
        self._validity = timedelta(minutes=int(validity_minutes))
        self._token_factory = token_factory or _new_token

    def start_session(self, subject, *, now: datetime | None = None) -> ClassSession:
        subject = require_non_empty(subject, "Subject")
        now = now or now_utc()

        session = ClassSession(token=self._token_factory(), subject=subject, expires_at=now + self._validity)
        self._store.replace(session)
        logger.info("Session started for %s (expires %s)", subject, session.expires_at.isoformat())
        return session

    def verify(self, token, *, now: datetime | None = None) -> str:
        """Return the subject of the live session ``token`` belongs to."""
        return self._live_session(token, now or now_utc()).subject

    def require_active(self, token, *, now: datetime | None = None) -> ClassSession:
        try:
            return self._live_session(token, now or now_utc())
        except (SessionNotFoundError, SessionExpiredError) as e:
            raise AuthorizationError("Invalid or expired session.") from e

    def _live_session(self, token, now: datetime) -> ClassSession:
        session = self._store.get()
        if session is None or not token or session.token != token:
            raise SessionNotFoundError("Invalid session token.")
        if session.is_expired(now):
            raise SessionExpiredError("Session has expired.")
        return session
