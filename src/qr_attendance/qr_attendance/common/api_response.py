"""Consistent JSON responses for every API route.

Routes return ``success_response(...)`` on the happy path and simply raise
domain exceptions otherwise; ``register_error_handlers`` turns those into
error envelopes with the right status code.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreCommunicationError,
    StoreOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def read_json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON inválido en el body del request")
    return data


def success_response(data: Any = None, message: Optional[str] = None, status: int = 200):
    return (
        jsonify({"success": True, "message": message, "data": data, "timestamp": _timestamp()}),
        status,
    )


def error_response(message: str, details: Any = None, status: int = 500):
    return (
        jsonify({"success": False, "error": message, "details": details, "timestamp": _timestamp()}),
        status,
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        logger.warning("Validation failed: %s", e)
        return error_response(str(e), status=400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return error_response(str(e), status=404)

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        logger.warning("Conflict: %s", e)
        details = {"attendance_id": e.attendance_id} if hasattr(e, "attendance_id") else None
        return error_response(str(e), details, status=409)

    @app.errorhandler(StoreCommunicationError)
    def _store_unreachable(e: StoreCommunicationError):
        logger.error("Odoo communication failed: %s", e)
        return error_response("Error de conexión con Odoo", {"message": str(e)}, status=502)

    @app.errorhandler(StoreOperationError)
    def _store_operation(e: StoreOperationError):
        logger.error("Odoo error (code=%s): %s", e.code, e.message)
        return error_response("Error en la comunicación con Odoo", {"message": e.message, "code": e.code}, status=500)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return error_response(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("Unhandled error")
        details = {"message": str(e)} if app.config.get("DEBUG") else None
        return error_response("Error interno del servidor", details, status=500)
