from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..common.datetime_utils import TimeWindow
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance store interface.

    Note (DIP): the service depends on this interface, never on Odoo directly.
    The only query shapes needed are equality on ``employee_id``, the open
    test ``check_out = False`` and an optional check-in range for history.
    """

    def find_open_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        window: Optional[TimeWindow] = None,
        limit: int,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, *, employee_id: int, check_in: str, extra: Optional[Mapping[str, Any]] = None) -> int:
        raise NotImplementedError

    def write_checkout(self, *, attendance_id: int, check_out: str, extra: Optional[Mapping[str, Any]] = None) -> bool:
        raise NotImplementedError
