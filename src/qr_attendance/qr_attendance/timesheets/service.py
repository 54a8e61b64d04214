from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import duration_between_times, format_date_for_store, utc_now
from ..common.validators import optional_float, require_non_empty, require_positive_id, sanitize_string
from ..core.constants import CIVIL_TZ, DEFAULT_TIMESHEET_LIMIT
from ..core.exceptions import ValidationError
from .model import TimesheetLine
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    """Use cases: list and book task hours scanned from a project/task QR."""

    def __init__(
        self,
        timesheets: TimesheetRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
        tz: tzinfo = CIVIL_TZ,
    ):
        self._timesheets = timesheets
        self._clock = clock
        self._tz = tz

    def list_for_employee(self, employee_id, *, limit=DEFAULT_TIMESHEET_LIMIT) -> Sequence[TimesheetLine]:
        employee_id = require_positive_id(employee_id, "userId")
        limit = require_positive_id(limit, "limit")
        return self._timesheets.list_for_employee(employee_id, limit=limit)

    def _resolve_hours(self, hours, start: Optional[str], end: Optional[str]) -> float:
        value = optional_float(hours, "hours")
        if value is None:
            if not start or not end:
                raise ValidationError("Indica las horas o la hora de inicio y fin (HH:MM)")
            try:
                value = duration_between_times(start, end).total_seconds() / 3600
            except ValueError:
                raise ValidationError("Hora de inicio/fin inválida, usa HH:MM") from None
        if value <= 0 or value > 24:
            raise ValidationError("Las horas deben ser mayores a 0 y como máximo 24")
        return round(value, 2)

    def log_work(
        self,
        *,
        employee_id,
        project_id,
        task_id,
        description: str,
        hours=None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> int:
        employee_id = require_positive_id(employee_id, "userId")
        project_id = require_positive_id(project_id, "projectId")
        task_id = require_positive_id(task_id, "taskId")
        description = sanitize_string(require_non_empty(description, "Descripción"))
        amount = self._resolve_hours(hours, start, end)
        work_date = format_date_for_store(now or self._clock(), self._tz)

        line_id = self._timesheets.create_line(
            employee_id=employee_id,
            project_id=project_id,
            task_id=task_id,
            work_date=work_date,
            hours=amount,
            description=description,
        )
        logger.info("Employee %s logged %.2fh on task %s (line #%s)", employee_id, amount, task_id, line_id)
        return line_id
