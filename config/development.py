import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

PORT = int(os.getenv("PORT", "3000"))
BASE_URL = os.getenv("BASE_URL", f"http://192.168.1.5:{PORT}")
STUDENT_PAGE_PATH = os.getenv("STUDENT_PAGE_PATH", "/student.html")

# "json" (flat db.json document) or "mysql"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", str(Path(__file__).resolve().parents[1] / "db.json"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "classroom_attendance"),
}

# Geofence around the classroom
CLASSROOM_LAT = float(os.getenv("CLASSROOM_LAT", "18.4725"))
CLASSROOM_LON = float(os.getenv("CLASSROOM_LON", "74.0015"))
ALLOWED_RADIUS_METERS = float(os.getenv("ALLOWED_RADIUS_METERS", "50"))

TOKEN_VALIDITY_MINUTES = int(os.getenv("TOKEN_VALIDITY_MINUTES", "5"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled with the mysql backend, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
