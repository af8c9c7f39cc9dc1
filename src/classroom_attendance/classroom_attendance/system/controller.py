from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/config", methods=["GET"], endpoint="client_config")
    def client_config():
        """Base URL the teacher page embeds in the student check-in link."""
        return jsonify({"baseUrl": app.config["BASE_URL"]})

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
