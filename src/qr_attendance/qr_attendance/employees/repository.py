from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_active(self, *, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_identification(self, dni: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(self, *, name: str, email: str, phone: str, dni: str) -> int:
        raise NotImplementedError
