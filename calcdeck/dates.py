"""Calendar arithmetic: date differences, offsets, workdays and time zones.

Dates are parsed with :class:`pandas.Timestamp`, which accepts ISO 8601
strings (``"2024-03-01"``, ``"2024-03-01 14:30"``) as well as ``datetime``
objects.

The year/month/day breakdown of a date difference uses fixed 365-day years
and 30-day months. It is an approximation for display, not a calendar-exact
difference; ``total_days`` is exact.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import numpy as np
import pandas as pd

from .errors import InvalidInput, OutOfRange

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30

TIME_ZONES: List[str] = [
    "UTC",
    "America/New_York",
    "America/Los_Angeles",
    "America/Chicago",
    "Europe/London",
    "Europe/Paris",
    "Asia/Tokyo",
    "Asia/Shanghai",
    "Australia/Sydney",
    "Pacific/Auckland",
]


class TimeUnit(Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"


class DateOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"


@dataclass(frozen=True)
class DateDifference:
    total_days: int
    years: int
    months: int
    days: int
    hours: float
    minutes: float
    seconds: float

    @property
    def breakdown(self) -> str:
        return f"{self.years} years, {self.months} months, {self.days} days"


@dataclass(frozen=True)
class WorkdaysResult:
    workdays: int
    total_days: int
    weekends: int
    holidays: int


def parse_datetime(value: Any, field: str = "date") -> pd.Timestamp:
    """Parse a date or date-time into a naive or aware ``Timestamp``.

    Raises:
        InvalidInput: If the value is blank or not a recognisable date.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(f"{field} is required", field=field)
    try:
        stamp = pd.Timestamp(value)
    except (ValueError, TypeError):
        raise InvalidInput(f"Invalid date: {value!r}", field=field)
    if pd.isna(stamp):
        raise InvalidInput(f"Invalid date: {value!r}", field=field)
    return stamp


def date_difference(start: Any, end: Any) -> DateDifference:
    """Absolute difference between two dates.

    Returns:
        DateDifference: Exact whole days and elapsed hours/minutes/seconds,
        plus a 365/30-day year/month/day breakdown.
    """
    delta = abs(parse_datetime(end, "end") - parse_datetime(start, "start"))
    seconds = delta.total_seconds()
    total_days = int(seconds // 86400)
    remainder = total_days % DAYS_PER_YEAR
    return DateDifference(
        total_days=total_days,
        years=total_days // DAYS_PER_YEAR,
        months=remainder // DAYS_PER_MONTH,
        days=remainder % DAYS_PER_MONTH,
        hours=seconds / 3600.0,
        minutes=seconds / 60.0,
        seconds=seconds,
    )


def date_arithmetic(
    date: Any, amount: int, unit: TimeUnit, operation: DateOperation = DateOperation.ADD
) -> pd.Timestamp:
    """Shift a date by a number of calendar units.

    Month and year steps clip to the end of the target month, so
    ``2024-01-31 + 1 month`` is ``2024-02-29``.

    Raises:
        InvalidInput: If ``amount`` is not a whole number.
        OutOfRange: If the shifted date falls outside the representable range.
    """
    base = parse_datetime(date)
    if int(amount) != amount:
        raise InvalidInput(f"Amount must be a whole number, got {amount}", field="amount")
    signed = int(amount) if operation is DateOperation.ADD else -int(amount)
    try:
        return _shift(base, signed, unit)
    except (OverflowError, ValueError):
        # pandas out-of-bounds errors subclass ValueError.
        raise OutOfRange("Resulting date is out of the supported range", field="amount")


def _shift(base: pd.Timestamp, signed: int, unit: TimeUnit) -> pd.Timestamp:
    if unit is TimeUnit.YEARS:
        return base + pd.DateOffset(years=signed)
    if unit is TimeUnit.MONTHS:
        return base + pd.DateOffset(months=signed)
    if unit is TimeUnit.DAYS:
        return base + timedelta(days=signed)
    if unit is TimeUnit.HOURS:
        return base + timedelta(hours=signed)
    return base + timedelta(minutes=signed)


def workdays(start: Any, end: Any, holidays: int = 0) -> WorkdaysResult:
    """Count Monday-to-Friday days in the inclusive range ``[start, end]``.

    Args:
        start: First day of the range.
        end: Last day of the range.
        holidays (int): Number of weekday holidays to subtract.

    Raises:
        InvalidInput: If ``start`` is after ``end``, or ``holidays`` is
            negative or exceeds the number of weekdays.
    """
    first = parse_datetime(start, "start").normalize()
    last = parse_datetime(end, "end").normalize()
    if first > last:
        raise InvalidInput("Start date must be before end date", field="start")
    if holidays < 0:
        raise InvalidInput("Holidays cannot be negative", field="holidays")

    total = int((last - first).days) + 1
    weekdays = int(
        np.busday_count(first.date(), (last + timedelta(days=1)).date())
    )
    if holidays > weekdays:
        raise InvalidInput(
            f"Holidays ({holidays}) exceed the {weekdays} weekdays in range", field="holidays"
        )
    return WorkdaysResult(
        workdays=weekdays - holidays,
        total_days=total,
        weekends=total - weekdays,
        holidays=holidays,
    )


def _zone(name: str, field: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidInput(f"Unknown time zone: {name!r}", field=field)


def convert_timezone(value: Any, from_zone: str, to_zone: str) -> pd.Timestamp:
    """Reinterpret a wall-clock time in ``from_zone`` as local time in ``to_zone``.

    Aware inputs keep their own offset and ``from_zone`` is ignored.

    Raises:
        InvalidInput: If a zone is unknown or the wall-clock time does not
            exist or is ambiguous in ``from_zone`` (DST transitions).
    """
    stamp = parse_datetime(value, "datetime")
    source = _zone(from_zone, "from_zone")
    target = _zone(to_zone, "to_zone")
    if stamp.tzinfo is None:
        stamp = stamp.tz_localize(source, ambiguous="NaT", nonexistent="NaT")
        if pd.isna(stamp):
            raise InvalidInput(
                f"{value} does not exist or is ambiguous in {from_zone}", field="datetime"
            )
    return stamp.tz_convert(target)
