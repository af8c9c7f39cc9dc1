from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.enums import StorageBackend
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DatabaseConnection, DBConfig
from .sessions.controller import register as register_sessions
from .system.controller import register as register_system
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "[classroom-attendance] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, static_folder=str(REPO_ROOT / "public"), static_url_path="")

    settings_module = get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("settings=%s storage=%s", settings_module, app.config["STORAGE_BACKEND"])

    backend = StorageBackend(str(app.config["STORAGE_BACKEND"]).lower())
    if backend is StorageBackend.MYSQL and app.config.get("AUTO_INIT_DB"):
        conn_factory = DatabaseConnection.get_instance(DBConfig.from_mapping(app.config["DB_CONFIG"]))
        apply_schema(conn_factory, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(conn_factory)))

    container = build_container(app.config)
    app.extensions["classroom_attendance"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"message": str(e)}), e.status_code

    register_system(app, container)
    register_sessions(app, container)
    register_users(app, container)
    register_attendance(app, container)

    logger.info("Server is running! Access it at %s", app.config["BASE_URL"])
    return app
