from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_all
from ..core.exceptions import AuthenticationError, ConflictError
from .credential_store import CredentialStore
from .model import User

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Student ID and password are required."


class AuthService:
    """Use case: student registration and login."""

    def __init__(self, credentials: CredentialStore):
        self._credentials = credentials

    def register(self, student_id, password) -> None:
        require_all(MISSING_CREDENTIALS, student_id, password)

        user = User(student_id=str(student_id), password_hash=generate_password_hash(str(password)))
        if not self._credentials.add_if_absent(user):
            raise ConflictError("This Student ID is already registered.")
        logger.info("Registered student %s", user.student_id)

    def login(self, student_id, password) -> str:
        require_all(MISSING_CREDENTIALS, student_id, password)

        user = self._credentials.get(str(student_id))
        if not user or not self._password_matches(user, str(password)):
            raise AuthenticationError("Invalid Student ID or password.")
        return user.student_id

    @staticmethod
    def _password_matches(user: User, password: str) -> bool:
        if user.legacy_plaintext:
            return user.password_hash == password
        try:
            return check_password_hash(user.password_hash, password)
        except ValueError:
            # unknown hash method in a hand-edited document
            return False
