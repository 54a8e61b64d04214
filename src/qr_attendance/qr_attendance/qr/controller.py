from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..container import Container


def _png(data: bytes):
    return send_file(io.BytesIO(data), mimetype="image/png", max_age=0)


def register(app: Flask, container: Container) -> None:
    service = container.qr_service

    @app.route("/api/qr/attendance.png", methods=["GET"], endpoint="qr_attendance")
    def qr_attendance():
        """Office QR that employees scan to check in or out."""
        return _png(service.render_png(service.attendance_payload()))

    @app.route("/api/qr/task.png", methods=["GET"], endpoint="qr_task")
    def qr_task():
        payload = service.task_payload(request.args.get("projectId"), request.args.get("taskId"))
        return _png(service.render_png(payload))
