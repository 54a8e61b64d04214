from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist in the store."""


class ConflictError(DomainError):
    """Raised when the request clashes with existing state."""


class AutoCloseFailed(ConflictError):
    """A stale open attendance could not be closed during a check-in.

    The check-in is abandoned; an administrator has to fix the record.
    """

    def __init__(self, attendance_id: int, message: Optional[str] = None):
        self.attendance_id = attendance_id
        super().__init__(
            message
            or f"No se pudo cerrar automáticamente el registro abierto #{attendance_id}. "
            "Contacta a un administrador."
        )


class StoreError(DomainError):
    """Base class for failures talking to the external record store."""


class StoreCommunicationError(StoreError):
    """The store was unreachable or answered with a transport-level failure."""


class StoreOperationError(StoreError):
    """The store accepted the request but reported an application-level failure."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
