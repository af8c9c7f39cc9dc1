from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_student():
        data = request.get_json(silent=True) or {}
        container.auth_service.register(data.get("studentId"), data.get("password"))
        return jsonify({"message": "Registration successful! You can now log in."}), 201

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        student_id = container.auth_service.login(data.get("studentId"), data.get("password"))
        return jsonify({"message": "Login successful!", "studentId": student_id})
