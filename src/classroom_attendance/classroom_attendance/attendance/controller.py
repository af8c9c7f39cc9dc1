from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/get-attendance", methods=["GET"], endpoint="get_attendance")
    def get_attendance():
        records = container.attendance_service.list_all()
        return jsonify([r.to_dict() for r in records])

    @app.route("/get-student-attendance", methods=["GET"], endpoint="get_student_attendance")
    def get_student_attendance():
        try:
            records = container.attendance_service.list_for_student(request.args.get("studentId"))
        except ValidationError:
            # Clients render this list directly, so a missing id still gets a list.
            return jsonify([]), 400
        return jsonify([r.to_dict() for r in records])

    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = request.get_json(silent=True) or {}
        subject = container.attendance_service.mark_attendance(
            student_id=data.get("studentId"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            token=data.get("token"),
        )
        return jsonify({"message": f"Attendance for {subject} marked successfully!"})
