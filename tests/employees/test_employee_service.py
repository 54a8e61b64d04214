from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.qr_attendance.qr_attendance.employees.service import EmployeeService


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo)


def test_find_by_email_is_case_insensitive(service):
    assert service.find_by_email("ANA@empresa.pe").employee_id == 1


def test_find_by_dni(service):
    assert service.find_by_dni("87654321").name == "Luis Quispe"


def test_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.find_by_dni("11111111")


def test_register_creates_employee(service, employees_repo):
    new_id = service.register(name=" María <Pérez> ", email="Maria@Empresa.pe", phone="955555555", dni="11223344")

    assert new_id == 3
    assert employees_repo.created == [
        {"name": "María Pérez", "email": "maria@empresa.pe", "phone": "955555555", "dni": "11223344"}
    ]


def test_register_rejects_duplicate_dni(service, employees_repo):
    with pytest.raises(ConflictError):
        service.register(name="Otra Ana", email="otra@empresa.pe", phone="955555555", dni="12345678")

    assert employees_repo.created == []


@pytest.mark.parametrize(
    "values",
    [
        {"name": "", "email": "a@b.pe", "phone": "955555555", "dni": "11223344"},
        {"name": "<>", "email": "a@b.pe", "phone": "955555555", "dni": "11223344"},
        {"name": "Ana", "email": "a-b.pe", "phone": "955555555", "dni": "11223344"},
        {"name": "Ana", "email": "a@b.pe", "phone": "55555555", "dni": "11223344"},
        {"name": "Ana", "email": "a@b.pe", "phone": "955555555", "dni": "1122"},
    ],
)
def test_register_validation(service, values):
    with pytest.raises(ValidationError):
        service.register(**values)
