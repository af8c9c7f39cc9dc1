from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_ALLOWED_RADIUS_METERS, DEFAULT_CLASSROOM_LAT, DEFAULT_CLASSROOM_LON
from .distance import haversine_m


@dataclass(frozen=True)
class Geofence:
    """Reference point plus the radius a student must be within."""

    latitude: float = DEFAULT_CLASSROOM_LAT
    longitude: float = DEFAULT_CLASSROOM_LON
    radius_m: float = DEFAULT_ALLOWED_RADIUS_METERS

    def distance_to(self, latitude, longitude) -> float:
        return haversine_m(latitude, longitude, self.latitude, self.longitude)

    def check(self, latitude, longitude) -> tuple[bool, float]:
        distance = self.distance_to(latitude, longitude)
        # NaN compares False, so a NaN distance is never inside
        return distance <= float(self.radius_m), distance
