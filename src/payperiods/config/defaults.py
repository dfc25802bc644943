"""Default configuration values for payperiods."""

from __future__ import annotations

from payperiods.config.schema import PayPeriodSettings

# Periods produced by generate_periods when no count is given.
DEFAULT_PERIOD_COUNT: int = 12

# Periods generated forward from each anchor when searching for a date.
# 24 weekly periods cover under half a year; 24 monthly periods two years.
LOOKAHEAD_WINDOW: int = 24

UPCOMING_LIMIT: int = 6
HISTORY_LIMIT: int = 6

# Per-config ceiling for the range-income walk (~190 years of weekly pay).
MAX_RANGE_ITERATIONS: int = 10_000


def default_settings() -> PayPeriodSettings:
    """Disabled settings with no income sources.

    Also the fallback when a persisted settings blob cannot be parsed.
    """
    return PayPeriodSettings(enabled=False, pay_periods=[])
