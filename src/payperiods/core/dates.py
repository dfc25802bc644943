"""Calendar-date helpers operating on ``YYYY-MM-DD`` values."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from payperiods.utils.exceptions import InvalidDateFormat

DateLike = date | str

DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_ISO_MONTH = re.compile(r"(\d{4})-(\d{2})")


def parse_date(value: DateLike) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string into a date.

    Args:
        value: A ``date`` (returned unchanged), a ``datetime`` (truncated to
            its calendar date) or an ISO date string.

    Returns:
        The calendar date.

    Raises:
        InvalidDateFormat: If ``value`` is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise InvalidDateFormat(value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        # e.g. 2024-02-30
        raise InvalidDateFormat(value) from None


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def add_weeks(value: date, weeks: int) -> date:
    return value + timedelta(weeks=weeks)


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month.

    ``2024-01-31`` plus one month is ``2024-02-29``.
    """
    return value + relativedelta(months=months)


def month_end(year: int, month: int) -> date:
    """Return the last calendar day of a month."""
    return date(year, month, calendar.monthrange(year, month)[1])


def parse_month(value: str) -> tuple[date, date]:
    """Parse a ``YYYY-MM`` string into the first and last day of that month.

    Raises:
        InvalidDateFormat: If ``value`` is not a valid month.
    """
    match = _ISO_MONTH.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidDateFormat(value, expected="YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidDateFormat(value, expected="YYYY-MM")
    return date(year, month, 1), month_end(year, month)
