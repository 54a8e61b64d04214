from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import requests

from .attendance.odoo_attendance_repository import OdooAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import utc_now
from .employees.odoo_employee_repository import OdooEmployeeRepository
from .employees.service import EmployeeService
from .health.service import HealthService
from .odoo.client import OdooClient
from .qr.service import QRService
from .timesheets.odoo_timesheet_repository import OdooTimesheetRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    odoo_client: OdooClient

    attendance_repo: OdooAttendanceRepository
    employees_repo: OdooEmployeeRepository
    timesheets_repo: OdooTimesheetRepository

    attendance_service: AttendanceService
    employee_service: EmployeeService
    timesheet_service: TimesheetService
    qr_service: QRService
    health_service: HealthService


def build_container(
    *,
    odoo_config: dict,
    public_url: str,
    qr_token: str,
    version: str,
    session: Optional[requests.Session] = None,
    clock: Callable[[], datetime] = utc_now,
) -> Container:
    odoo_client = OdooClient.from_settings(odoo_config, session=session)

    attendance_repo = OdooAttendanceRepository(odoo_client)
    employees_repo = OdooEmployeeRepository(odoo_client)
    timesheets_repo = OdooTimesheetRepository(odoo_client)

    return Container(
        odoo_client=odoo_client,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        timesheets_repo=timesheets_repo,
        attendance_service=AttendanceService(attendance_repo, clock=clock),
        employee_service=EmployeeService(employees_repo),
        timesheet_service=TimesheetService(timesheets_repo, clock=clock),
        qr_service=QRService(public_url, qr_token),
        health_service=HealthService(
            odoo_config,
            lambda config: OdooClient(config, session=session),
            version=version,
            started_at=clock(),
            clock=clock,
        ),
    )
