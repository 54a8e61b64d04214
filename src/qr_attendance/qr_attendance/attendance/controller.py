from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask

from ..common.api_response import error_response, read_json_body, success_response
from ..common.validators import optional_float, require_non_empty
from ..container import Container
from ..core.enums import AttendanceAction
from ..core.exceptions import ValidationError
from . import messages
from .model import GeoPoint


def parse_geo(data: Mapping[str, Any]) -> Optional[GeoPoint]:
    """Location may come flat (``latitude``...) or nested under ``geo``."""
    source = data.get("geo") if isinstance(data.get("geo"), Mapping) else data
    lat = optional_float(source.get("latitude", source.get("lat")), "latitude")
    lon = optional_float(source.get("longitude", source.get("lon")), "longitude")
    accuracy = optional_float(source.get("accuracy"), "accuracy")
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise ValidationError("Ubicación incompleta: se requieren latitud y longitud")
    return GeoPoint(latitude=lat, longitude=lon, accuracy=accuracy)


def outcome_response(outcome):
    """Map a reconciler outcome onto the HTTP contract."""
    if outcome.action == AttendanceAction.REJECTED_OPEN_CHECKOUT_REQUIRED:
        return error_response(outcome.message, outcome.to_dict(), status=409)
    if outcome.action == AttendanceAction.AUTO_CLOSED_THEN_OPENED:
        return success_response(
            outcome.to_dict(), messages.checked_in_after_auto_close(outcome.check_in, outcome.closed_check_in)
        )
    if outcome.action == AttendanceAction.CLOSED_OK:
        return success_response(outcome.to_dict(), messages.checked_out(outcome.check_out))
    return success_response(outcome.to_dict(), messages.checked_in(outcome.check_in))


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/assistance/in", methods=["POST"], endpoint="assistance_in")
    def assistance_in():
        data = read_json_body()
        outcome = service.resolve_attendance_action(data.get("userId"), geo=parse_geo(data))
        return outcome_response(outcome)

    @app.route("/api/assistance/out", methods=["POST"], endpoint="assistance_out")
    def assistance_out():
        data = read_json_body()
        outcome = service.resolve_checkout(data.get("registryId"), geo=parse_geo(data))
        return outcome_response(outcome)

    @app.route("/api/assistance/scan", methods=["POST"], endpoint="assistance_scan")
    def assistance_scan():
        """QR scan: verify the office token, then check in or out depending on the open record."""
        data = read_json_body()
        code = require_non_empty(data.get("code"), "Código QR")
        if not container.qr_service.verify_token(code):
            raise ValidationError("Código QR inválido o expirado")

        outcome = service.toggle_attendance(data.get("userId"), geo=parse_geo(data))
        return outcome_response(outcome)

    @app.route("/api/assistance", methods=["POST"], endpoint="assistance_history")
    def assistance_history():
        data = read_json_body()
        history = service.get_history(data.get("userId"), all_history=bool(data.get("allHistory", False)))
        return success_response(
            history.to_dict(), messages.history_summary(len(history.records), history.total_hours)
        )
