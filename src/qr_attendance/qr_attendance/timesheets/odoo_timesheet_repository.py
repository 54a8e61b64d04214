from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_store_date
from ..core.constants import TIMESHEET_MODEL
from ..odoo.client import OdooClient
from .model import TimesheetLine
from .repository import TimesheetRepository

_FIELDS = ["id", "date", "project_id", "task_id", "name", "unit_amount", "employee_id"]


def _many2one(value: Any) -> tuple[Optional[int], Optional[str]]:
    if isinstance(value, (list, tuple)) and value:
        return int(value[0]), (str(value[1]) if len(value) > 1 else None)
    if isinstance(value, int) and not isinstance(value, bool):
        return value, None
    return None, None


def _to_line(row: Mapping[str, Any]) -> TimesheetLine:
    project_id, project_name = _many2one(row.get("project_id"))
    task_id, task_name = _many2one(row.get("task_id"))
    employee_id, _ = _many2one(row.get("employee_id"))
    return TimesheetLine(
        line_id=int(row["id"]),
        employee_id=employee_id or 0,
        work_date=parse_store_date(row["date"]),
        hours=float(row.get("unit_amount") or 0.0),
        description=str(row.get("name") or ""),
        project_id=project_id,
        project_name=project_name,
        task_id=task_id,
        task_name=task_name,
    )


class OdooTimesheetRepository(TimesheetRepository):
    def __init__(self, client: OdooClient):
        self._client = client

    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[TimesheetLine]:
        rows = self._client.search_read(
            TIMESHEET_MODEL,
            [["employee_id", "=", employee_id]],
            _FIELDS,
            limit=limit,
            order="date desc",
        )
        return [_to_line(r) for r in rows]

    def create_line(
        self,
        *,
        employee_id: int,
        project_id: int,
        task_id: int,
        work_date: str,
        hours: float,
        description: str,
    ) -> int:
        return self._client.create(
            TIMESHEET_MODEL,
            {
                "employee_id": employee_id,
                "project_id": project_id,
                "task_id": task_id,
                "date": work_date,
                "unit_amount": hours,
                "name": description,
            },
        )
