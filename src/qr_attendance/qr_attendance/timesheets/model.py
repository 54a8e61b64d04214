from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import decimal_hours_to_hhmm


@dataclass(frozen=True)
class TimesheetLine:
    """Domain entity: an ``account.analytic.line`` booked against a task."""

    line_id: int
    employee_id: int
    work_date: date
    hours: float
    description: str
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    task_id: Optional[int] = None
    task_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.line_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "project_id": self.project_id,
            "project_name": self.project_name,
            "task_id": self.task_id,
            "task_name": self.task_name,
            "name": self.description,
            "unit_amount": self.hours,
            "duration": decimal_hours_to_hhmm(self.hours),
        }
