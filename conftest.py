from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from src.qr_attendance.qr_attendance.attendance.model import AttendanceRecord
from src.qr_attendance.qr_attendance.common.datetime_utils import parse_store_datetime
from src.qr_attendance.qr_attendance.core.exceptions import StoreCommunicationError
from src.qr_attendance.qr_attendance.employees.model import Employee
from src.qr_attendance.qr_attendance.timesheets.model import TimesheetLine


class InMemoryAttendance:
    """Fake attendance store that records every write."""

    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.creates: list[dict] = []
        self.writes: list[dict] = []
        self.fail_writes = False
        self.ack_writes = True

    def add(self, attendance_id: int, employee_id: int, check_in: str, check_out: Optional[str] = None, worked_hours=0.0):
        self.records[attendance_id] = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            check_in=parse_store_datetime(check_in),
            check_out=parse_store_datetime(check_out) if check_out else None,
            worked_hours=worked_hours,
        )
        self._id = max(self._id, attendance_id)

    def find_open_for_employee(self, employee_id: int):
        items = [r for r in self.records.values() if r.employee_id == employee_id and r.is_open]
        return sorted(items, key=lambda r: r.check_in, reverse=True)

    def list_for_employee(self, employee_id: int, *, window=None, limit: int):
        items = [r for r in self.records.values() if r.employee_id == employee_id]
        if window:
            start, end = parse_store_datetime(window.start), parse_store_datetime(window.end)
            items = [r for r in items if start <= r.check_in <= end]
        items.sort(key=lambda r: r.check_in, reverse=True)
        return items[:limit]

    def create_checkin(self, *, employee_id: int, check_in: str, extra=None) -> int:
        self._id += 1
        self.creates.append({"employee_id": employee_id, "check_in": check_in, "extra": extra})
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            check_in=parse_store_datetime(check_in),
        )
        return self._id

    def write_checkout(self, *, attendance_id: int, check_out: str, extra=None) -> bool:
        self.writes.append({"attendance_id": attendance_id, "check_out": check_out, "extra": extra})
        if self.fail_writes:
            raise StoreCommunicationError("connection reset")
        if not self.ack_writes or attendance_id not in self.records:
            return False
        current = self.records[attendance_id]
        self.records[attendance_id] = AttendanceRecord(
            attendance_id=current.attendance_id,
            employee_id=current.employee_id,
            check_in=current.check_in,
            check_out=parse_store_datetime(check_out),
            worked_hours=current.worked_hours,
        )
        return True


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.employees: dict[int, Employee] = {e.employee_id: e for e in employees}
        self.created: list[dict] = []

    def list_active(self, *, limit: int):
        return [e for e in self.employees.values() if e.active][:limit]

    def find_by_email(self, email: str):
        return next((e for e in self.employees.values() if (e.work_email or "").lower() == email), None)

    def find_by_identification(self, dni: str):
        return next((e for e in self.employees.values() if e.identification_id == dni), None)

    def create_employee(self, *, name: str, email: str, phone: str, dni: str) -> int:
        new_id = max(self.employees, default=0) + 1
        self.created.append({"name": name, "email": email, "phone": phone, "dni": dni})
        self.employees[new_id] = Employee(new_id, name, email, phone, dni)
        return new_id


class InMemoryTimesheets:
    def __init__(self, lines=()):
        self.lines: list[TimesheetLine] = list(lines)
        self.created: list[dict] = []

    def list_for_employee(self, employee_id: int, *, limit: int):
        return [line for line in self.lines if line.employee_id == employee_id][:limit]

    def create_line(self, **values) -> int:
        self.created.append(values)
        return 100 + len(self.created)


@pytest.fixture
def fixed_now() -> datetime:
    # 2026-02-24 10:00:00 in Lima
    return datetime(2026, 2, 24, 15, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(1, "Ana Torres", "ana@empresa.pe", "987654321", "12345678"),
            Employee(2, "Luis Quispe", "luis@empresa.pe", "912345678", "87654321"),
        ]
    )


@pytest.fixture
def timesheets_repo() -> InMemoryTimesheets:
    return InMemoryTimesheets()
