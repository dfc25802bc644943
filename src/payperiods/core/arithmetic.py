"""Period boundary arithmetic for a single pay frequency.

Each function takes the start date of one period and derives a neighbouring
boundary. End dates are always computed from the next start, so consecutive
periods of one frequency never overlap or leave gaps.
"""

from __future__ import annotations

from datetime import date

from payperiods.core.dates import (
    DateLike,
    add_days,
    add_months,
    add_weeks,
    month_end,
    parse_date,
)

# Semi-monthly pay dates fall on the 15th and the last day of the month.
SEMI_MONTHLY_MID_DAY = 15


def next_period_start(start: DateLike, frequency: str) -> date:
    """Return the start date of the period following the one starting at ``start``.

    ``custom`` is treated as monthly. Unrecognized frequencies fall back to
    bi-weekly.

    Raises:
        InvalidDateFormat: If ``start`` is not a valid date.
    """
    current = parse_date(start)

    if frequency == "weekly":
        return add_weeks(current, 1)
    if frequency == "bi-weekly":
        return add_weeks(current, 2)
    if frequency == "semi-monthly":
        if current.day <= SEMI_MONTHLY_MID_DAY:
            return month_end(current.year, current.month)
        following = add_months(current.replace(day=1), 1)
        return following.replace(day=SEMI_MONTHLY_MID_DAY)
    if frequency in ("monthly", "custom"):
        return add_months(current, 1)
    return add_weeks(current, 2)


def previous_period_start(start: DateLike, frequency: str) -> date:
    """Return the start date of the period preceding the one starting at ``start``.

    Mirrors :func:`next_period_start`. For semi-monthly, a day after the 15th
    steps back to the 15th; otherwise to the last day of the previous month.
    """
    current = parse_date(start)

    if frequency == "weekly":
        return add_weeks(current, -1)
    if frequency == "bi-weekly":
        return add_weeks(current, -2)
    if frequency == "semi-monthly":
        if current.day > SEMI_MONTHLY_MID_DAY:
            return current.replace(day=SEMI_MONTHLY_MID_DAY)
        return add_days(current.replace(day=1), -1)
    if frequency in ("monthly", "custom"):
        return add_months(current, -1)
    return add_weeks(current, -2)


def period_end_date(start: DateLike, frequency: str) -> date:
    """Return the inclusive end date of the period starting at ``start``."""
    return add_days(next_period_start(start, frequency), -1)
