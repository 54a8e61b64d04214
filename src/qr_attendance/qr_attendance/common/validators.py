from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_DNI_RE = re.compile(r"^\d{8}$")
_PHONE_RE = re.compile(r"^9\d{8}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} es requerido")
    return value.strip()


def sanitize_string(value: str) -> str:
    return value.replace("<", "").replace(">", "").strip()


def require_positive_id(value: Any, field_name: str) -> int:
    """Accept positive ints and numeric strings; reject bools, floats with decimals and the rest."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} debe ser un número positivo")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValidationError(f"{field_name} debe ser numérico")
        value = int(value)
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} debe ser un número entero")
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name} debe ser un número positivo")
    return value


def require_dni(value: Any) -> str:
    value = require_non_empty(value, "DNI")
    if not _DNI_RE.match(value):
        raise ValidationError("DNI debe tener 8 dígitos")
    return value


def require_phone(value: Any) -> str:
    value = require_non_empty(value, "Teléfono")
    if not _PHONE_RE.match(value):
        raise ValidationError("Teléfono debe empezar con 9 y tener 9 dígitos")
    return value


def require_email(value: Any) -> str:
    value = require_non_empty(value, "Email")
    if not _EMAIL_RE.match(value):
        raise ValidationError("Email inválido")
    return value.lower()


def optional_float(value: Any, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} debe ser numérico")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser numérico") from None
