from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_dni, require_email, require_non_empty, require_phone, sanitize_string
from ..core.constants import DEFAULT_EMPLOYEE_LIMIT
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: employee lookup for the login screen and self-registration."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active(self, *, limit: int = DEFAULT_EMPLOYEE_LIMIT) -> Sequence[Employee]:
        return self._employees.list_active(limit=limit)

    def find_by_email(self, email: str) -> Employee:
        employee = self._employees.find_by_email(require_email(email))
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        return employee

    def find_by_dni(self, dni: str) -> Employee:
        employee = self._employees.find_by_identification(require_dni(dni))
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        return employee

    def register(self, *, name: str, email: str, phone: str, dni: str) -> int:
        name = sanitize_string(require_non_empty(name, "Nombre"))
        if not name:
            raise ValidationError("Nombre es requerido")
        email = require_email(email)
        phone = require_phone(phone)
        dni = require_dni(dni)

        if self._employees.find_by_identification(dni):
            raise ConflictError("Ya existe un empleado con ese DNI")

        employee_id = self._employees.create_employee(name=name, email=email, phone=phone, dni=dni)
        logger.info("Registered employee #%s", employee_id)
        return employee_id
