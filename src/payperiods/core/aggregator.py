"""Pay period generation and aggregation across income sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from payperiods.config.defaults import (
    DEFAULT_PERIOD_COUNT,
    HISTORY_LIMIT,
    LOOKAHEAD_WINDOW,
    MAX_RANGE_ITERATIONS,
    UPCOMING_LIMIT,
)
from payperiods.config.schema import PayPeriodConfig
from payperiods.core.arithmetic import next_period_start, period_end_date
from payperiods.core.dates import DateLike, parse_date, parse_month
from payperiods.utils.exceptions import RangeTooLarge

logger = logging.getLogger(__name__)


class PayPeriod(BaseModel):
    """One concrete occurrence of an income source.

    Attributes:
        id: ``"{config_id}-{index}"`` where index counts from the anchor.
        start_date: First day of the period.
        end_date: Last day of the period (inclusive).
        amount: Income for the period, copied from the config.
        source: Label copied from the config.
        is_active: Flag copied from the config.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    start_date: date
    end_date: date
    amount: int | float
    source: str
    is_active: bool

    def contains(self, day: date) -> bool:
        """Check whether ``day`` falls within the inclusive period bounds."""
        return self.start_date <= day <= self.end_date


@dataclass
class PayPeriodCalculation:
    """Pay periods around a reference date, merged across income sources."""

    current_period: PayPeriod | None = None
    next_period: PayPeriod | None = None
    previous_period: PayPeriod | None = None
    upcoming_periods: list[PayPeriod] = field(default_factory=list)
    historical_periods: list[PayPeriod] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible shape with camelCase keys and ISO dates."""

        def _dump(period: PayPeriod | None) -> dict[str, Any] | None:
            if period is None:
                return None
            return period.model_dump(mode="json", by_alias=True)

        return {
            "currentPeriod": _dump(self.current_period),
            "nextPeriod": _dump(self.next_period),
            "previousPeriod": _dump(self.previous_period),
            "upcomingPeriods": [_dump(p) for p in self.upcoming_periods],
            "historicalPeriods": [_dump(p) for p in self.historical_periods],
        }


def generate_periods(config: PayPeriodConfig, count: int = DEFAULT_PERIOD_COUNT) -> list[PayPeriod]:
    """Generate ``count`` consecutive periods starting at the config's anchor.

    Activity is ignored here; the aggregate entry points filter inactive
    configs themselves.

    Args:
        config: Income source to expand.
        count: Number of periods to produce.

    Returns:
        Periods ordered by start date, contiguous and non-overlapping.

    Raises:
        ValueError: If ``count`` is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    periods: list[PayPeriod] = []
    current = config.start_date
    for i in range(count):
        periods.append(
            PayPeriod(
                id=f"{config.id}-{i}",
                start_date=current,
                end_date=period_end_date(current, config.frequency),
                amount=config.amount,
                source=config.source,
                is_active=config.is_active,
            )
        )
        current = next_period_start(current, config.frequency)
    return periods


def find_period_containing(
    config: PayPeriodConfig,
    reference_date: DateLike,
    window: int = LOOKAHEAD_WINDOW,
) -> PayPeriod | None:
    """Find the period of ``config`` containing ``reference_date``.

    Only the first ``window`` periods from the anchor are searched, so dates
    before the anchor or beyond the window yield ``None``.
    """
    day = parse_date(reference_date)
    for period in generate_periods(config, window):
        if period.contains(day):
            return period
    return None


def aggregate(
    configs: Iterable[PayPeriodConfig],
    reference_date: DateLike,
    window: int = LOOKAHEAD_WINDOW,
    upcoming_limit: int = UPCOMING_LIMIT,
    historical_limit: int = HISTORY_LIMIT,
) -> PayPeriodCalculation:
    """Locate pay periods around ``reference_date`` across all active configs.

    Each active config contributes ``window`` periods from its own anchor.
    The merged periods are ordered by start date; ties keep config order.

    Args:
        configs: Income sources; inactive ones are skipped.
        reference_date: The day to position against ("today").
        window: Periods generated per config.
        upcoming_limit: Maximum number of upcoming periods returned.
        historical_limit: Maximum number of historical periods returned,
            keeping the ones closest to ``reference_date``.

    Returns:
        PayPeriodCalculation; every field is empty when no config is active.
    """
    day = parse_date(reference_date)

    merged: list[PayPeriod] = []
    for config in configs:
        if config.is_active:
            merged.extend(generate_periods(config, window))
    merged.sort(key=lambda p: p.start_date)

    if not merged:
        return PayPeriodCalculation()

    current = next((p for p in merged if p.contains(day)), None)
    upcoming = [p for p in merged if p.start_date > day]
    historical = [p for p in merged if p.end_date < day]

    return PayPeriodCalculation(
        current_period=current,
        next_period=upcoming[0] if upcoming else None,
        previous_period=historical[-1] if historical else None,
        upcoming_periods=upcoming[:upcoming_limit],
        historical_periods=historical[-historical_limit:] if historical_limit > 0 else [],
    )


def total_income_for_range(
    configs: Iterable[PayPeriodConfig],
    range_start: DateLike,
    range_end: DateLike,
    max_iterations: int = MAX_RANGE_ITERATIONS,
) -> float:
    """Sum the income of every period overlapping ``[range_start, range_end]``.

    Each active config is walked forward from its anchor until a period
    starts after ``range_end``; each overlapping period adds the config's
    amount once.
    An inverted range (``range_end`` before ``range_start``) sums to zero.

    Raises:
        RangeTooLarge: If a config needs more than ``max_iterations`` periods
            to reach ``range_end``.
    """
    start = parse_date(range_start)
    end = parse_date(range_end)
    if end < start:
        return 0.0

    total = 0.0
    for config in configs:
        if not config.is_active:
            continue

        current = config.start_date
        steps = 0
        while current <= end:
            if steps >= max_iterations:
                raise RangeTooLarge(config.id, max_iterations)
            period_end = period_end_date(current, config.frequency)
            if period_end >= start:
                total += config.amount
            current = next_period_start(current, config.frequency)
            steps += 1
        logger.debug("Walked %s periods for config %s", steps, config.id)

    return total


def total_income_for_month(configs: Iterable[PayPeriodConfig], month: str) -> float:
    """Sum the income of periods overlapping a calendar month given as ``YYYY-MM``."""
    first, last = parse_month(month)
    return total_income_for_range(configs, first, last)
