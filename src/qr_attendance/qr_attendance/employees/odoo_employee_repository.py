from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import EMPLOYEE_MODEL
from ..odoo.client import OdooClient
from .model import Employee
from .repository import EmployeeRepository

_FIELDS = ["id", "name", "work_email", "work_phone", "identification_id", "image_128", "active"]


def _text(value: Any) -> Optional[str]:
    # Empty Odoo char fields come back as False.
    return str(value) if value else None


def _to_employee(row: Mapping[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        name=str(row.get("name") or ""),
        work_email=_text(row.get("work_email")),
        work_phone=_text(row.get("work_phone")),
        identification_id=_text(row.get("identification_id")),
        image_128=_text(row.get("image_128")),
        active=bool(row.get("active", True)),
    )


class OdooEmployeeRepository(EmployeeRepository):
    def __init__(self, client: OdooClient):
        self._client = client

    def _find_one(self, domain: list) -> Optional[Employee]:
        rows = self._client.search_read(EMPLOYEE_MODEL, domain, _FIELDS, limit=1)
        return _to_employee(rows[0]) if rows else None

    def list_active(self, *, limit: int) -> Sequence[Employee]:
        rows = self._client.search_read(EMPLOYEE_MODEL, [["active", "=", True]], _FIELDS, limit=limit, order="name asc")
        return [_to_employee(r) for r in rows]

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self._find_one([["active", "=", True], ["work_email", "=ilike", email]])

    def find_by_identification(self, dni: str) -> Optional[Employee]:
        return self._find_one([["identification_id", "=", dni]])

    def create_employee(self, *, name: str, email: str, phone: str, dni: str) -> int:
        return self._client.create(
            EMPLOYEE_MODEL,
            {
                "name": name,
                "work_email": email,
                "work_phone": phone,
                "identification_id": dni,
                "active": True,
            },
        )
