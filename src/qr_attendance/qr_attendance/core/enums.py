from __future__ import annotations

from enum import Enum


class AttendanceAction(str, Enum):
    """Resultado de una decisión de asistencia."""

    OPENED_CHECK_IN = "opened_check_in"
    AUTO_CLOSED_THEN_OPENED = "auto_closed_then_opened"
    REJECTED_OPEN_CHECKOUT_REQUIRED = "rejected_open_checkout_required"
    CLOSED_OK = "closed_ok"


class HistoryFilter(str, Enum):
    TODAY = "today"
    ALL = "all"


class CheckStatus(str, Enum):
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
