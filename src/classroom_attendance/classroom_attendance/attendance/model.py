from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Location:
    lat: float
    lon: float


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student present for one subject on one day.

    ``timestamp`` is the ISO instant string exactly as persisted; its date
    prefix is the day used for duplicate detection. Documents from earlier
    deployments may lack ``studentId`` or ``subject``; those load as None.
    """

    student_id: Optional[str]
    subject: Optional[str]
    timestamp: str
    location: Location

    @property
    def day(self) -> str:
        return self.timestamp.split("T")[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "subject": self.subject,
            "timestamp": self.timestamp,
            "location": {"lat": self.location.lat, "lon": self.location.lon},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        location = data.get("location") or {}
        return cls(
            student_id=data.get("studentId"),
            subject=data.get("subject"),
            timestamp=str(data.get("timestamp") or ""),
            location=Location(lat=location.get("lat"), lon=location.get("lon")),
        )
