"""Tests for period generation, lookup, and aggregation."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from payperiods.config.schema import PayPeriodConfig
from payperiods.core.aggregator import (
    PayPeriodCalculation,
    aggregate,
    find_period_containing,
    generate_periods,
)
from payperiods.utils.exceptions import InvalidDateFormat


def _ids(periods: list) -> list[str]:
    return [p.id for p in periods]


class TestGeneratePeriods:
    def test_two_biweekly_periods(self, biweekly_config: PayPeriodConfig) -> None:
        periods = generate_periods(biweekly_config, 2)
        assert len(periods) == 2
        first, second = periods
        assert first.id == "test-1-0"
        assert first.start_date == date(2024, 1, 1)
        assert first.end_date == date(2024, 1, 14)
        assert first.amount == 2000
        assert first.source == "Job 1"
        assert first.is_active
        assert second.id == "test-1-1"
        assert second.start_date == date(2024, 1, 15)
        assert second.end_date == date(2024, 1, 28)

    def test_default_count(self, biweekly_config: PayPeriodConfig) -> None:
        assert len(generate_periods(biweekly_config)) == 12

    def test_zero_count(self, biweekly_config: PayPeriodConfig) -> None:
        assert generate_periods(biweekly_config, 0) == []

    def test_negative_count_rejected(self, biweekly_config: PayPeriodConfig) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            generate_periods(biweekly_config, -1)

    def test_inactive_configs_still_generate(self, inactive_config: PayPeriodConfig) -> None:
        periods = generate_periods(inactive_config, 3)
        assert len(periods) == 3
        assert not any(p.is_active for p in periods)

    def test_deterministic(self, biweekly_config: PayPeriodConfig) -> None:
        assert generate_periods(biweekly_config, 24) == generate_periods(biweekly_config, 24)

    @pytest.mark.parametrize(
        "frequency", ["weekly", "bi-weekly", "semi-monthly", "monthly", "custom"]
    )
    @pytest.mark.parametrize("start", ["2024-01-01", "2024-01-31", "2023-11-16"])
    def test_contiguous_and_non_overlapping(self, start: str, frequency: str) -> None:
        config = PayPeriodConfig(id="c", frequency=frequency, start_date=start, amount=1)
        periods = generate_periods(config, 24)
        assert len(periods) == 24
        assert periods[0].start_date == date.fromisoformat(start)
        for period in periods:
            assert period.start_date <= period.end_date
        for prev, nxt in zip(periods, periods[1:]):
            assert prev.end_date + timedelta(days=1) == nxt.start_date

    def test_semi_monthly_sequence(self) -> None:
        config = PayPeriodConfig(
            id="s", frequency="semi-monthly", start_date="2024-01-15", amount=1000
        )
        starts = [p.start_date for p in generate_periods(config, 5)]
        assert starts == [
            date(2024, 1, 15),
            date(2024, 1, 31),
            date(2024, 2, 15),
            date(2024, 2, 29),
            date(2024, 3, 15),
        ]


class TestFindPeriodContaining:
    def test_finds_first_period(self, biweekly_config: PayPeriodConfig) -> None:
        period = find_period_containing(biweekly_config, "2024-01-10")
        assert period is not None
        assert period.id == "test-1-0"

    def test_before_anchor_is_none(self, biweekly_config: PayPeriodConfig) -> None:
        assert find_period_containing(biweekly_config, "2023-12-01") is None

    def test_inclusive_bounds(self, biweekly_config: PayPeriodConfig) -> None:
        assert find_period_containing(biweekly_config, "2024-01-14").id == "test-1-0"
        assert find_period_containing(biweekly_config, "2024-01-15").id == "test-1-1"

    def test_last_day_of_window(self, biweekly_config: PayPeriodConfig) -> None:
        period = find_period_containing(biweekly_config, date(2024, 12, 1))
        assert period is not None
        assert period.id == "test-1-23"

    def test_beyond_window_is_none(self, biweekly_config: PayPeriodConfig) -> None:
        assert find_period_containing(biweekly_config, "2024-12-02") is None

    def test_wider_window(self, biweekly_config: PayPeriodConfig) -> None:
        period = find_period_containing(biweekly_config, "2024-12-02", window=30)
        assert period is not None
        assert period.id == "test-1-24"

    def test_accepts_datetime(self, biweekly_config: PayPeriodConfig) -> None:
        period = find_period_containing(biweekly_config, datetime(2024, 1, 14, 23, 59))
        assert period is not None
        assert period.id == "test-1-0"

    def test_invalid_reference_date(self, biweekly_config: PayPeriodConfig) -> None:
        with pytest.raises(InvalidDateFormat):
            find_period_containing(biweekly_config, "2024/01/10")


class TestAggregate:
    def test_inactive_only(self, inactive_config: PayPeriodConfig) -> None:
        calc = aggregate([inactive_config], "2024-01-10")
        assert calc.current_period is None
        assert calc.next_period is None
        assert calc.previous_period is None
        assert calc.upcoming_periods == []
        assert calc.historical_periods == []

    def test_datetime_reference(self, biweekly_config: PayPeriodConfig) -> None:
        calc = aggregate([biweekly_config], datetime(2024, 1, 10, 12))
        assert calc.current_period.id == "test-1-0"
        assert calc.next_period.id == "test-1-1"

    def test_no_configs(self) -> None:
        assert aggregate([], "2024-01-10") == PayPeriodCalculation()

    def test_single_config(self, biweekly_config: PayPeriodConfig) -> None:
        calc = aggregate([biweekly_config], "2024-03-01")
        assert calc.current_period.id == "test-1-4"
        assert calc.current_period.start_date == date(2024, 2, 26)
        assert calc.next_period.id == "test-1-5"
        assert calc.previous_period.id == "test-1-3"
        assert _ids(calc.upcoming_periods) == [f"test-1-{i}" for i in range(5, 11)]
        assert _ids(calc.historical_periods) == [f"test-1-{i}" for i in range(4)]

    def test_historical_keeps_most_recent(self, biweekly_config: PayPeriodConfig) -> None:
        calc = aggregate([biweekly_config], "2024-06-01")
        assert calc.current_period.id == "test-1-10"
        assert calc.previous_period.id == "test-1-9"
        assert _ids(calc.historical_periods) == [f"test-1-{i}" for i in range(4, 10)]
        assert _ids(calc.upcoming_periods) == [f"test-1-{i}" for i in range(11, 17)]

    def test_skips_inactive(
        self, biweekly_config: PayPeriodConfig, inactive_config: PayPeriodConfig
    ) -> None:
        calc = aggregate([inactive_config, biweekly_config], "2024-01-10")
        assert calc.current_period.id == "test-1-0"
        assert all(p.id.startswith("test-1-") for p in calc.upcoming_periods)

    def test_merges_configs_by_start_date(
        self, weekly_config: PayPeriodConfig, monthly_config: PayPeriodConfig
    ) -> None:
        calc = aggregate([weekly_config, monthly_config], "2024-01-10")
        # B-0 (01-05..02-04) sorts before A-1 (01-08..01-14); both contain the date.
        assert calc.current_period.id == "B-0"
        assert calc.next_period.id == "A-2"
        assert calc.previous_period.id == "A-0"
        assert _ids(calc.upcoming_periods) == ["A-2", "A-3", "A-4", "A-5", "B-1", "A-6"]
        assert _ids(calc.historical_periods) == ["A-0"]

    def test_ties_keep_config_order(
        self, weekly_config: PayPeriodConfig, monthly_config: PayPeriodConfig
    ) -> None:
        # A-5 and B-1 both start on 2024-02-05.
        calc = aggregate([monthly_config, weekly_config], "2024-01-10")
        assert _ids(calc.upcoming_periods) == ["A-2", "A-3", "A-4", "B-1", "A-5", "A-6"]

    def test_old_anchor_outside_window(self) -> None:
        config = PayPeriodConfig(id="old", frequency="weekly", start_date="2020-01-01", amount=1)
        calc = aggregate([config], "2024-01-10")
        assert calc.current_period is None
        assert calc.next_period is None
        assert calc.upcoming_periods == []
        assert calc.previous_period.id == "old-23"
        assert _ids(calc.historical_periods) == [f"old-{i}" for i in range(18, 24)]

    def test_window_is_tunable(self) -> None:
        config = PayPeriodConfig(id="old", frequency="monthly", start_date="2020-01-01", amount=1)
        assert aggregate([config], "2024-01-10").current_period is None
        calc = aggregate([config], "2024-01-10", window=60)
        assert calc.current_period.id == "old-48"
        assert calc.current_period.start_date == date(2024, 1, 1)

    def test_limits(self, biweekly_config: PayPeriodConfig) -> None:
        calc = aggregate([biweekly_config], "2024-06-01", upcoming_limit=2, historical_limit=0)
        assert _ids(calc.upcoming_periods) == ["test-1-11", "test-1-12"]
        assert calc.historical_periods == []
        assert calc.previous_period.id == "test-1-9"

    def test_to_dict(self, biweekly_config: PayPeriodConfig) -> None:
        data = aggregate([biweekly_config], "2024-01-10").to_dict()
        assert set(data) == {
            "currentPeriod",
            "nextPeriod",
            "previousPeriod",
            "upcomingPeriods",
            "historicalPeriods",
        }
        assert data["currentPeriod"] == {
            "id": "test-1-0",
            "startDate": "2024-01-01",
            "endDate": "2024-01-14",
            "amount": 2000,
            "source": "Job 1",
            "isActive": True,
        }
        assert data["previousPeriod"] is None
        assert len(data["upcomingPeriods"]) == 6
