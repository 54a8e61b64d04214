from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import TimeWindow, parse_store_datetime
from ..core.constants import ATTENDANCE_MODEL
from ..odoo.client import OdooClient
from .model import AttendanceRecord
from .repository import AttendanceRepository

_FIELDS = ["id", "employee_id", "check_in", "check_out", "worked_hours"]


def _many2one(value: Any) -> tuple[int, Optional[str]]:
    # Odoo returns many2one fields as [id, display_name].
    if isinstance(value, (list, tuple)) and value:
        return int(value[0]), (str(value[1]) if len(value) > 1 else None)
    return int(value), None


def _to_record(row: Mapping[str, Any]) -> AttendanceRecord:
    employee_id, employee_name = _many2one(row["employee_id"])
    check_out = row.get("check_out")
    return AttendanceRecord(
        attendance_id=int(row["id"]),
        employee_id=employee_id,
        employee_name=employee_name,
        check_in=parse_store_datetime(row["check_in"]),
        check_out=parse_store_datetime(check_out) if check_out else None,
        worked_hours=float(row.get("worked_hours") or 0.0),
    )


class OdooAttendanceRepository(AttendanceRepository):
    def __init__(self, client: OdooClient):
        self._client = client

    def find_open_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        rows = self._client.search_read(
            ATTENDANCE_MODEL,
            [["employee_id", "=", employee_id], ["check_out", "=", False]],
            _FIELDS,
            order="check_in desc",
        )
        return [_to_record(r) for r in rows]

    def list_for_employee(
        self,
        employee_id: int,
        *,
        window: Optional[TimeWindow] = None,
        limit: int,
    ) -> Sequence[AttendanceRecord]:
        domain: list = [["employee_id", "=", employee_id]]
        if window:
            domain += [["check_in", ">=", window.start], ["check_in", "<=", window.end]]
        rows = self._client.search_read(ATTENDANCE_MODEL, domain, _FIELDS, limit=limit, order="check_in desc")
        return [_to_record(r) for r in rows]

    def create_checkin(self, *, employee_id: int, check_in: str, extra: Optional[Mapping[str, Any]] = None) -> int:
        values = {"employee_id": employee_id, "check_in": check_in}
        values.update(extra or {})
        return self._client.create(ATTENDANCE_MODEL, values)

    def write_checkout(self, *, attendance_id: int, check_out: str, extra: Optional[Mapping[str, Any]] = None) -> bool:
        values = {"check_out": check_out}
        values.update(extra or {})
        return self._client.write(ATTENDANCE_MODEL, [attendance_id], values)
