from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.constants import CHECKIN_GEO_FIELDS, CHECKOUT_GEO_FIELDS, STORE_DATETIME_FORMAT
from ..core.enums import AttendanceAction, HistoryFilter
from ..core.exceptions import ValidationError


def _fmt(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(STORE_DATETIME_FORMAT) if value else None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one ``hr.attendance`` row.

    ``check_in``/``check_out`` are naive civil wall-clock datetimes.
    ``check_out is None`` means the record is open.
    """

    attendance_id: int
    employee_id: int
    check_in: datetime
    check_out: Optional[datetime] = None
    worked_hours: float = 0.0
    employee_name: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "check_in": _fmt(self.check_in),
            "check_out": _fmt(self.check_out),
            "worked_hours": self.worked_hours,
        }


@dataclass(frozen=True)
class GeoPoint:
    """Optional device location attached to a check-in or check-out."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValidationError("Latitud fuera de rango")
        if not -180 <= self.longitude <= 180:
            raise ValidationError("Longitud fuera de rango")
        if self.accuracy is not None and self.accuracy < 0:
            raise ValidationError("Precisión no puede ser negativa")

    def _as_fields(self, names: tuple[str, str, str]) -> dict:
        lat_field, lon_field, acc_field = names
        values = {lat_field: self.latitude, lon_field: self.longitude}
        if self.accuracy is not None:
            values[acc_field] = self.accuracy
        return values

    def as_checkin_fields(self) -> dict:
        return self._as_fields(CHECKIN_GEO_FIELDS)

    def as_checkout_fields(self) -> dict:
        return self._as_fields(CHECKOUT_GEO_FIELDS)


@dataclass(frozen=True)
class OpenedCheckIn:
    attendance_id: int
    employee_id: int
    check_in: str
    action: AttendanceAction = field(default=AttendanceAction.OPENED_CHECK_IN, init=False)

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "check_in": self.check_in,
        }


@dataclass(frozen=True)
class AutoClosedThenOpened:
    attendance_id: int
    employee_id: int
    check_in: str
    closed_attendance_id: int
    closed_check_in: str
    closed_check_out: str
    closed_hours_open: float
    action: AttendanceAction = field(default=AttendanceAction.AUTO_CLOSED_THEN_OPENED, init=False)

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "check_in": self.check_in,
            "auto_closed": {
                "attendance_id": self.closed_attendance_id,
                "check_in": self.closed_check_in,
                "check_out": self.closed_check_out,
                "hours_open": self.closed_hours_open,
            },
        }


@dataclass(frozen=True)
class RejectedOpenCheckoutRequired:
    """Conflict outcome: the employee must check out before checking in again."""

    attendance_id: int
    employee_id: int
    check_in: str
    hours_open: float
    message: str
    action: AttendanceAction = field(default=AttendanceAction.REJECTED_OPEN_CHECKOUT_REQUIRED, init=False)

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "check_in": self.check_in,
            "hours_open": self.hours_open,
        }


@dataclass(frozen=True)
class ClosedOk:
    attendance_id: int
    check_out: str
    action: AttendanceAction = field(default=AttendanceAction.CLOSED_OK, init=False)

    def to_dict(self) -> dict:
        return {"action": self.action.value, "attendance_id": self.attendance_id, "check_out": self.check_out}


@dataclass(frozen=True)
class AttendanceHistory:
    """Read-model for the attendance summary screen."""

    records: list[AttendanceRecord]
    filter: HistoryFilter
    total_hours: float

    def to_dict(self) -> dict:
        return {
            "result": [r.to_dict() for r in self.records],
            "count": len(self.records),
            "filter": self.filter.value,
            "total_hours": self.total_hours,
        }
