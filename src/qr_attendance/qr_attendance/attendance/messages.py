"""User-facing attendance messages (Spanish, the language of the end users)."""

from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import format_for_message, format_hours_minutes, parse_store_datetime


def open_record_conflict(check_in: datetime) -> str:
    return (
        f"Ya tienes un registro de entrada abierto desde {format_for_message(check_in)}. "
        "Por favor, registra tu salida primero."
    )


def checked_in(check_in: str) -> str:
    return f"¡Entrada registrada a las {parse_store_datetime(check_in):%H:%M}!"


def checked_in_after_auto_close(check_in: str, closed_check_in: str) -> str:
    closed = format_for_message(parse_store_datetime(closed_check_in))
    return f"{checked_in(check_in)} Tu entrada anterior del {closed} se cerró automáticamente."


def checked_out(check_out: str) -> str:
    return f"¡Salida registrada a las {parse_store_datetime(check_out):%H:%M}!"


def history_summary(count: int, total_hours: float) -> str:
    return f"{count} registro(s), {format_hours_minutes(total_hours)} trabajadas"
