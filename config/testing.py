import os
import tempfile
from pathlib import Path

SECRET_KEY = "test-secret"

PORT = 3000
BASE_URL = "http://localhost:3000"
STUDENT_PAGE_PATH = "/student.html"

STORAGE_BACKEND = "json"
DATA_FILE = os.getenv("DATA_FILE", str(Path(tempfile.gettempdir()) / "classroom_attendance_test.json"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "classroom_attendance_test"),
}

CLASSROOM_LAT = 18.4725
CLASSROOM_LON = 74.0015
ALLOWED_RADIUS_METERS = 50.0

TOKEN_VALIDITY_MINUTES = 5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
