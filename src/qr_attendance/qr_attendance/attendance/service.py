from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional, Union

from ..common.datetime_utils import (
    day_window,
    end_of_day,
    format_for_store,
    hours_between,
    round_hours,
    to_civil,
    utc_now,
)
from ..common.validators import require_positive_id
from ..core.constants import AUTO_CLOSE_HOURS, CIVIL_TZ, DEFAULT_HISTORY_LIMIT, STORE_DATETIME_FORMAT
from ..core.enums import HistoryFilter
from ..core.exceptions import AutoCloseFailed, StoreError, StoreOperationError
from . import messages
from .model import (
    AttendanceHistory,
    AttendanceRecord,
    AutoClosedThenOpened,
    ClosedOk,
    GeoPoint,
    OpenedCheckIn,
    RejectedOpenCheckoutRequired,
)
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

CheckInOutcome = Union[OpenedCheckIn, AutoClosedThenOpened, RejectedOpenCheckoutRequired]


class AttendanceService:
    """Attendance reconciler.

    Decides the next valid transition for an employee using only
    read-then-act calls against the attendance store. There is no
    transaction: two concurrent check-ins for the same employee may both
    create an open record. The service keeps no state between calls.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
        tz: tzinfo = CIVIL_TZ,
        auto_close_hours: float = AUTO_CLOSE_HOURS,
    ):
        self._attendance = attendance
        self._clock = clock
        self._tz = tz
        self._auto_close_hours = float(auto_close_hours)

    def _find_open(self, employee_id: int) -> Optional[AttendanceRecord]:
        # Any date: an open record from a previous day still blocks a new check-in.
        open_records = self._attendance.find_open_for_employee(employee_id)
        if not open_records:
            return None
        if len(open_records) > 1:
            logger.warning(
                "Employee %s has %d open attendances (%s); using #%s",
                employee_id,
                len(open_records),
                ", ".join(str(r.attendance_id) for r in open_records),
                open_records[0].attendance_id,
            )
        return open_records[0]

    def _hours_open(self, record: AttendanceRecord, now: datetime) -> float:
        return hours_between(record.check_in, to_civil(now, self._tz))

    def _open(self, employee_id: int, now: datetime, geo: Optional[GeoPoint]) -> tuple[int, str]:
        check_in = format_for_store(now, self._tz)
        attendance_id = self._attendance.create_checkin(
            employee_id=employee_id,
            check_in=check_in,
            extra=geo.as_checkin_fields() if geo else None,
        )
        logger.info("Employee %s checked in at %s (attendance #%s)", employee_id, check_in, attendance_id)
        return attendance_id, check_in

    def _auto_close(self, record: AttendanceRecord) -> str:
        check_out = end_of_day(record.check_in).strftime(STORE_DATETIME_FORMAT)
        try:
            ok = self._attendance.write_checkout(attendance_id=record.attendance_id, check_out=check_out)
        except StoreError as e:
            logger.error("Auto-close of attendance #%s failed: %s", record.attendance_id, e)
            raise AutoCloseFailed(record.attendance_id) from e
        if not ok:
            logger.error("Auto-close of attendance #%s was not acknowledged", record.attendance_id)
            raise AutoCloseFailed(record.attendance_id)
        logger.info("Auto-closed stale attendance #%s at %s", record.attendance_id, check_out)
        return check_out

    def _decide_check_in(
        self,
        employee_id: int,
        now: datetime,
        current: Optional[AttendanceRecord],
        geo: Optional[GeoPoint],
    ) -> CheckInOutcome:
        if current is None:
            attendance_id, check_in = self._open(employee_id, now, geo)
            return OpenedCheckIn(attendance_id=attendance_id, employee_id=employee_id, check_in=check_in)

        hours_open = self._hours_open(current, now)
        original_check_in = current.check_in.strftime(STORE_DATETIME_FORMAT)

        if hours_open > self._auto_close_hours:
            closed_check_out = self._auto_close(current)
            attendance_id, check_in = self._open(employee_id, now, geo)
            return AutoClosedThenOpened(
                attendance_id=attendance_id,
                employee_id=employee_id,
                check_in=check_in,
                closed_attendance_id=current.attendance_id,
                closed_check_in=original_check_in,
                closed_check_out=closed_check_out,
                closed_hours_open=round_hours(hours_open),
            )

        logger.info(
            "Employee %s already has open attendance #%s (%.2fh)", employee_id, current.attendance_id, hours_open
        )
        return RejectedOpenCheckoutRequired(
            attendance_id=current.attendance_id,
            employee_id=employee_id,
            check_in=original_check_in,
            hours_open=round_hours(hours_open),
            message=messages.open_record_conflict(current.check_in),
        )

    def resolve_attendance_action(
        self,
        employee_id: int,
        now: Optional[datetime] = None,
        geo: Optional[GeoPoint] = None,
    ) -> CheckInOutcome:
        employee_id = require_positive_id(employee_id, "employeeId")
        now = now or self._clock()
        return self._decide_check_in(employee_id, now, self._find_open(employee_id), geo)

    def resolve_checkout(
        self,
        record_id: int,
        now: Optional[datetime] = None,
        geo: Optional[GeoPoint] = None,
    ) -> ClosedOk:
        record_id = require_positive_id(record_id, "registryId")
        now = now or self._clock()
        check_out = format_for_store(now, self._tz)

        ok = self._attendance.write_checkout(
            attendance_id=record_id,
            check_out=check_out,
            extra=geo.as_checkout_fields() if geo else None,
        )
        if not ok:
            raise StoreOperationError(f"Odoo no confirmó la salida del registro #{record_id}")
        logger.info("Attendance #%s checked out at %s", record_id, check_out)
        return ClosedOk(attendance_id=record_id, check_out=check_out)

    def toggle_attendance(
        self,
        employee_id: int,
        now: Optional[datetime] = None,
        geo: Optional[GeoPoint] = None,
    ) -> Union[CheckInOutcome, ClosedOk]:
        """QR scan flow: close the current open record, or check in when there is none.

        A record past the auto-close threshold is not checked out with the
        scan time; it is auto-closed and a new check-in is opened instead.
        """
        employee_id = require_positive_id(employee_id, "employeeId")
        now = now or self._clock()
        current = self._find_open(employee_id)
        if current is not None and self._hours_open(current, now) <= self._auto_close_hours:
            return self.resolve_checkout(current.attendance_id, now, geo)
        return self._decide_check_in(employee_id, now, current, geo)

    def get_history(
        self,
        employee_id: int,
        now: Optional[datetime] = None,
        *,
        all_history: bool = False,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> AttendanceHistory:
        employee_id = require_positive_id(employee_id, "userId")
        now = now or self._clock()
        window = None if all_history else day_window(now, self._tz)

        records = list(self._attendance.list_for_employee(employee_id, window=window, limit=limit))
        total = round(sum(r.worked_hours for r in records), 2)
        return AttendanceHistory(
            records=records,
            filter=HistoryFilter.ALL if all_history else HistoryFilter.TODAY,
            total_hours=total,
        )
