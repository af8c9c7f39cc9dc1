from __future__ import annotations

import io
from urllib.parse import urlencode

import qrcode
from flask import Flask, jsonify, request, send_file

from ..container import Container
from ..core.constants import DEFAULT_STUDENT_PAGE_PATH


def _qr_png(data: str) -> io.BytesIO:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def register(app: Flask, container: Container) -> None:
    @app.route("/teacher/start-session", methods=["POST"], endpoint="start_session")
    def start_session():
        data = request.get_json(silent=True) or {}
        session = container.session_service.start_session(data.get("subject"))
        return jsonify({"token": session.token})

    @app.route("/teacher/session-qr", methods=["GET"], endpoint="session_qr")
    def session_qr():
        """QR code pointing students at the check-in page for the live session."""
        token = request.args.get("token")
        container.session_service.verify(token)

        base_url = str(app.config["BASE_URL"]).rstrip("/")
        page = app.config.get("STUDENT_PAGE_PATH", DEFAULT_STUDENT_PAGE_PATH)
        target = f"{base_url}{page}?{urlencode({'token': token})}"
        return send_file(_qr_png(target), mimetype="image/png")

    @app.route("/student/verify-token", methods=["GET"], endpoint="verify_token")
    def verify_token():
        subject = container.session_service.verify(request.args.get("token"))
        return jsonify({"subject": subject})
