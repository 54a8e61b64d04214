from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import utc_now
from ..core.enums import CheckStatus, HealthStatus
from ..core.exceptions import StoreError
from ..odoo.client import REQUIRED_KEYS, OdooClient, OdooConfig

logger = logging.getLogger(__name__)

ENV_NAMES = {
    "url": "ODOO_URL",
    "database": "ODOO_DATABASE",
    "user_id": "ODOO_USER_ID",
    "api_key": "ODOO_API_KEY",
}


@dataclass(frozen=True)
class Check:
    status: CheckStatus
    message: str
    response_time_ms: Optional[int] = None

    def to_dict(self) -> dict:
        data = {"status": self.status.value, "message": self.message}
        if self.response_time_ms is not None:
            data["responseTime"] = self.response_time_ms
        return data


@dataclass(frozen=True)
class HealthReport:
    status: HealthStatus
    timestamp: str
    uptime_seconds: float
    version: str
    checks: dict[str, Check]

    @property
    def http_status(self) -> int:
        return 503 if self.status == HealthStatus.UNHEALTHY else 200

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "uptime": self.uptime_seconds,
            "version": self.version,
            "checks": {name: check.to_dict() for name, check in self.checks.items()},
        }


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


def overall_status(checks: Mapping[str, Check]) -> HealthStatus:
    statuses = [c.status for c in checks.values()]
    if all(s == CheckStatus.UP for s in statuses):
        return HealthStatus.HEALTHY
    if any(s == CheckStatus.DOWN for s in statuses):
        return HealthStatus.UNHEALTHY
    return HealthStatus.DEGRADED


class HealthService:
    def __init__(
        self,
        odoo_settings: Mapping,
        client_factory: Callable[[OdooConfig], OdooClient],
        *,
        version: str,
        started_at: datetime,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._odoo_settings = dict(odoo_settings or {})
        self._client_factory = client_factory
        self._version = version
        self._started_at = started_at
        self._clock = clock

    def _missing_settings(self) -> list[str]:
        return [ENV_NAMES[k] for k in REQUIRED_KEYS if not self._odoo_settings.get(k)]

    def check_environment(self) -> Check:
        missing = self._missing_settings()
        if missing:
            return Check(CheckStatus.DOWN, f"Variables faltantes: {', '.join(missing)}")
        return Check(CheckStatus.UP, "Todas las variables de entorno configuradas")

    def check_odoo(self) -> Check:
        if self._missing_settings():
            return Check(CheckStatus.UNKNOWN, "Odoo no configurado")

        started = time.monotonic()
        try:
            client = self._client_factory(OdooConfig.from_mapping(self._odoo_settings))
            info = client.server_version()
        except (StoreError, ValueError) as e:
            logger.error("Health check: Odoo connection failed: %s", e)
            return Check(CheckStatus.DOWN, str(e), _elapsed_ms(started))

        version = info.get("server_version") or "desconocida"
        return Check(CheckStatus.UP, f"Odoo {version} disponible", _elapsed_ms(started))

    def report(self) -> HealthReport:
        started = time.monotonic()
        checks = {
            "environment": self.check_environment(),
            "odoo": self.check_odoo(),
        }
        checks["api"] = Check(CheckStatus.UP, "API funcionando", _elapsed_ms(started))

        status = overall_status(checks)
        if status != HealthStatus.HEALTHY:
            logger.warning(
                "Health check %s: %s",
                status.value,
                {name: c.status.value for name, c in checks.items()},
            )

        now = self._clock()
        return HealthReport(
            status=status,
            timestamp=now.isoformat(),
            uptime_seconds=round((now - self._started_at).total_seconds(), 3),
            version=self._version,
            checks=checks,
        )

    def is_ready(self) -> bool:
        """Cheap probe: configuration only, no round-trip to Odoo."""
        return not self._missing_settings()
