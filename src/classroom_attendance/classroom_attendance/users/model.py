from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class User:
    """A registered student.

    ``legacy_plaintext`` marks accounts imported from documents that kept the
    raw password; for those ``password_hash`` holds the password itself.
    """

    student_id: str
    password_hash: str
    legacy_plaintext: bool = False

    def to_dict(self) -> dict[str, Any]:
        if self.legacy_plaintext:
            return {"studentId": self.student_id, "password": self.password_hash}
        return {"studentId": self.student_id, "passwordHash": self.password_hash}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        if "passwordHash" in data:
            return cls(student_id=str(data["studentId"]), password_hash=str(data["passwordHash"]))
        return cls(student_id=str(data["studentId"]), password_hash=str(data.get("password", "")), legacy_plaintext=True)
