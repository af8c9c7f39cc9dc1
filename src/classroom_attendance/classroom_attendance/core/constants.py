"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_M = 6371000.0

DEFAULT_CLASSROOM_LAT = 18.4725
DEFAULT_CLASSROOM_LON = 74.0015
DEFAULT_ALLOWED_RADIUS_METERS = 50

DEFAULT_TOKEN_VALIDITY_MINUTES = 5
SESSION_TOKEN_BYTES = 16

DEFAULT_STUDENT_PAGE_PATH = "/student.html"
