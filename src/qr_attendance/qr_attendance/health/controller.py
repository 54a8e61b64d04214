from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.health_service

    @app.route("/api/health", methods=["GET", "HEAD"], endpoint="health")
    def health():
        # HEAD is the cheap probe: configuration only, no Odoo round-trip.
        if request.method == "HEAD":
            response = Response(status=200 if service.is_ready() else 503)
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            return response

        report = service.report()
        return jsonify(report.to_dict()), report.http_status
