from __future__ import annotations

from datetime import datetime

import pytest

from src.qr_attendance.qr_attendance.attendance.service import AttendanceService
from src.qr_attendance.qr_attendance.container import Container
from src.qr_attendance.qr_attendance.employees.service import EmployeeService
from src.qr_attendance.qr_attendance.health.service import HealthService
from src.qr_attendance.qr_attendance.main import create_app
from src.qr_attendance.qr_attendance.qr.service import QRService
from src.qr_attendance.qr_attendance.timesheets.service import TimesheetService

ODOO_SETTINGS = {"url": "http://odoo.test/jsonrpc", "database": "test", "user_id": 2, "api_key": "test-key"}


class FakeVersionClient:
    def server_version(self) -> dict:
        return {"server_version": "17.0"}


@pytest.fixture
def container(attendance_repo, employees_repo, timesheets_repo, fixed_now) -> Container:
    clock = lambda: fixed_now  # noqa: E731
    return Container(
        odoo_client=None,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        timesheets_repo=timesheets_repo,
        attendance_service=AttendanceService(attendance_repo, clock=clock),
        employee_service=EmployeeService(employees_repo),
        timesheet_service=TimesheetService(timesheets_repo, clock=clock),
        qr_service=QRService("http://app.test", "TEST_QR_TOKEN"),
        health_service=HealthService(
            ODOO_SETTINGS,
            lambda config: FakeVersionClient(),
            version="test",
            started_at=datetime(2026, 2, 24, 14, 0, 0, tzinfo=fixed_now.tzinfo),
            clock=clock,
        ),
    )


@pytest.fixture
def client(container):
    app = create_app(container, settings_module="config.testing")
    return app.test_client()
