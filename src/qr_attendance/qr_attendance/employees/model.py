from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an ``hr.employee`` as seen by the QR app."""

    employee_id: int
    name: str
    work_email: Optional[str] = None
    work_phone: Optional[str] = None
    identification_id: Optional[str] = None
    image_128: Optional[str] = None
    active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "work_email": self.work_email,
            "work_phone": self.work_phone,
            "identification_id": self.identification_id,
            "image_128": self.image_128,
            "active": self.active,
        }
