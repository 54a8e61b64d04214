"""Date and time helpers.

Every timestamp exchanged with Odoo is a naive ``YYYY-MM-DD HH:MM:SS`` string
in a fixed civil timezone. The zone is always passed explicitly; nothing here
reads the host process timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import CIVIL_TZ, STORE_DATE_FORMAT, STORE_DATETIME_FORMAT

_SHORT_WEEKDAYS = ("lun", "mar", "mié", "jue", "vie", "sáb", "dom")
_SHORT_MONTHS = ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic")


@dataclass(frozen=True)
class TimeWindow:
    """A civil day expressed as store strings (inclusive bounds)."""

    start: str
    end: str


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime.

    Note: Wrapped so tests can inject a fixed clock.
    """
    return datetime.now(timezone.utc)


def to_civil(instant: datetime, tz: tzinfo = CIVIL_TZ) -> datetime:
    """Convert an aware instant into a naive wall-clock datetime in ``tz``."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("Se requiere un datetime con zona horaria")
    return instant.astimezone(tz).replace(tzinfo=None)


def format_for_store(instant: datetime, tz: tzinfo = CIVIL_TZ) -> str:
    return to_civil(instant, tz).strftime(STORE_DATETIME_FORMAT)


def format_date_for_store(instant: datetime, tz: tzinfo = CIVIL_TZ) -> str:
    return to_civil(instant, tz).strftime(STORE_DATE_FORMAT)


def parse_store_datetime(value: str) -> datetime:
    """Parse an Odoo ``YYYY-MM-DD HH:MM:SS`` string into a naive civil datetime."""
    return datetime.strptime(value.strip(), STORE_DATETIME_FORMAT)


def parse_store_date(value: str) -> date:
    return datetime.strptime(value.strip(), STORE_DATE_FORMAT).date()


def end_of_day(moment: datetime) -> datetime:
    """23:59:59 of the calendar date of ``moment``."""
    return datetime.combine(moment.date(), time(23, 59, 59))


def day_window(instant: datetime, tz: tzinfo = CIVIL_TZ) -> TimeWindow:
    day = to_civil(instant, tz).date()
    return TimeWindow(
        start=datetime.combine(day, time(0, 0, 0)).strftime(STORE_DATETIME_FORMAT),
        end=datetime.combine(day, time(23, 59, 59)).strftime(STORE_DATETIME_FORMAT),
    )


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours between two naive civil datetimes.

    Plain subtraction is exact because the civil zone has no DST.
    """
    return (end - start).total_seconds() / 3600


def round_hours(hours: float, places: int = 1) -> float:
    """Round half-up (6.25 -> 6.3), unlike the built-in banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(hours)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_for_message(moment: datetime) -> str:
    """Spanish short form used in user messages, e.g. ``mar, 24 feb 2026, 13:55``."""
    weekday = _SHORT_WEEKDAYS[moment.weekday()]
    month = _SHORT_MONTHS[moment.month - 1]
    return f"{weekday}, {moment.day} {month} {moment.year}, {moment:%H:%M}"


def format_hours_minutes(decimal_hours: float) -> str:
    """``8.0833`` -> ``8h 05m``."""
    total_minutes = int(round(decimal_hours * 60))
    return f"{total_minutes // 60}h {total_minutes % 60:02d}m"


def decimal_hours_to_hhmm(decimal_hours: float) -> str:
    total_minutes = int(round(decimal_hours * 60))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value.strip(), "%H:%M").time()


def duration_between_times(start: str, end: str) -> timedelta:
    """Duration between two ``HH:MM`` strings; an earlier end means it crossed midnight."""
    start_t = parse_hhmm(start)
    end_t = parse_hhmm(end)
    minutes = (end_t.hour * 60 + end_t.minute) - (start_t.hour * 60 + start_t.minute)
    if minutes < 0:
        minutes += 24 * 60
    return timedelta(minutes=minutes)
