"""Odoo JSON-RPC client.

One instance per application, built by the container and injected into the
repositories. Tests pass a fake ``session`` instead of talking to Odoo.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import requests

from ..core.constants import DEFAULT_ODOO_TIMEOUT_SECONDS
from ..core.exceptions import StoreCommunicationError, StoreOperationError, ValidationError

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("url", "database", "user_id", "api_key")

_FRIENDLY_PREFIXES = {
    "ValidationError": "Datos inválidos para Odoo",
    "UserError": "Datos inválidos para Odoo",
    "AccessError": "Permisos insuficientes en Odoo",
    "AccessDenied": "Permisos insuficientes en Odoo",
}


@dataclass(frozen=True)
class OdooConfig:
    url: str
    database: str
    user_id: int
    api_key: str
    timeout: float = DEFAULT_ODOO_TIMEOUT_SECONDS

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "OdooConfig":
        missing = [k for k in REQUIRED_KEYS if not values.get(k)]
        if missing:
            raise ValidationError(f"Faltan variables de configuración de Odoo: {', '.join(missing)}")
        return cls(
            url=str(values["url"]),
            database=str(values["database"]),
            user_id=int(values["user_id"]),
            api_key=str(values["api_key"]),
            timeout=float(values.get("timeout") or DEFAULT_ODOO_TIMEOUT_SECONDS),
        )


def _friendly_message(error: Mapping[str, Any]) -> str:
    message = str(error.get("message") or "Error desconocido de Odoo")
    data = error.get("data")
    if not isinstance(data, Mapping):
        return message

    detail = str(data.get("message") or message)
    name = str(data.get("name") or "")
    for marker, prefix in _FRIENDLY_PREFIXES.items():
        if marker in name:
            return f"{prefix}: {detail}"
    return detail


class OdooClient:
    def __init__(self, config: Optional[OdooConfig], *, session: Optional[requests.Session] = None):
        self._config = config
        self._settings: Mapping[str, Any] = {}
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], *, session: Optional[requests.Session] = None) -> "OdooClient":
        """Client whose settings are checked on the first call.

        The app still starts without Odoo variables so /api/health can report them.
        """
        client = cls(None, session=session)
        client._settings = dict(settings or {})
        return client

    @property
    def config(self) -> OdooConfig:
        if self._config is None:
            try:
                self._config = OdooConfig.from_mapping(self._settings)
            except (ValidationError, ValueError) as e:
                raise StoreCommunicationError(f"Odoo no está configurado: {e}") from e
        return self._config

    def _post(self, service: str, method: str, args: list) -> Any:
        config = self.config
        payload = {
            "jsonrpc": "2.0",
            "method": "call",
            "id": next(self._ids),
            "params": {"service": service, "method": method, "args": args},
        }
        try:
            response = self._session.post(
                config.url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=config.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.RequestException as e:
            raise StoreCommunicationError(f"Failed to communicate with Odoo: {e}") from e
        except ValueError as e:
            raise StoreCommunicationError(f"Invalid JSON from Odoo: {e}") from e

        if not isinstance(body, Mapping):
            raise StoreCommunicationError("Unexpected response shape from Odoo")

        error = body.get("error")
        if error:
            if not isinstance(error, Mapping):
                error = {"message": str(error)}
            raise StoreOperationError(_friendly_message(error), code=error.get("code"), data=error.get("data"))
        return body.get("result")

    def execute_kw(
        self,
        model: str,
        method: str,
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        config = self.config
        started = time.monotonic()
        try:
            result = self._post(
                "object",
                "execute_kw",
                [
                    config.database,
                    config.user_id,
                    config.api_key,
                    model,
                    method,
                    list(args),
                    dict(kwargs or {}),
                ],
            )
        except Exception:
            logger.error(
                "Odoo %s on %s failed (%dms)", method, model, (time.monotonic() - started) * 1000
            )
            raise
        logger.debug("Odoo %s on %s ok (%dms)", method, model, (time.monotonic() - started) * 1000)
        return result

    def search_read(
        self,
        model: str,
        domain: Sequence[Any] = (),
        fields: Sequence[str] = (),
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order: Optional[str] = None,
    ) -> list[dict]:
        kwargs: dict[str, Any] = {"fields": list(fields)}
        if limit is not None:
            kwargs["limit"] = int(limit)
        if offset is not None:
            kwargs["offset"] = int(offset)
        if order:
            kwargs["order"] = order
        return list(self.execute_kw(model, "search_read", [list(domain)], kwargs) or [])

    def search(self, model: str, domain: Sequence[Any] = (), *, limit: Optional[int] = None) -> list[int]:
        kwargs = {"limit": int(limit)} if limit is not None else {}
        return list(self.execute_kw(model, "search", [list(domain)], kwargs) or [])

    def read(self, model: str, ids: Sequence[int], fields: Sequence[str] = ()) -> list[dict]:
        return list(self.execute_kw(model, "read", [list(ids)], {"fields": list(fields)}) or [])

    def search_count(self, model: str, domain: Sequence[Any] = ()) -> int:
        return int(self.execute_kw(model, "search_count", [list(domain)]) or 0)

    def create(self, model: str, values: Mapping[str, Any]) -> int:
        result = self.execute_kw(model, "create", [dict(values)])
        # Newer Odoo versions answer a list of ids even for a single dict.
        if isinstance(result, list):
            result = result[0] if result else None
        if not isinstance(result, int) or isinstance(result, bool):
            raise StoreOperationError(f"Odoo no devolvió un id al crear en {model}")
        return result

    def write(self, model: str, ids: Sequence[int], values: Mapping[str, Any]) -> bool:
        return bool(self.execute_kw(model, "write", [list(ids), dict(values)]))

    def server_version(self) -> dict:
        return dict(self._post("common", "version", []) or {})
