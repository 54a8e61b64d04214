from __future__ import annotations

from typing import Protocol, Sequence

from .model import TimesheetLine


class TimesheetRepository(Protocol):
    def list_for_employee(self, employee_id: int, *, limit: int) -> Sequence[TimesheetLine]:
        raise NotImplementedError

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
        raise NotImplementedError
