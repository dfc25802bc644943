"""Shared test fixtures."""

from __future__ import annotations

import pytest

from payperiods.config.schema import PayPeriodConfig


@pytest.fixture
def biweekly_config() -> PayPeriodConfig:
    """Bi-weekly paycheck anchored on 2024-01-01."""
    return PayPeriodConfig(
        id="test-1",
        frequency="bi-weekly",
        start_date="2024-01-01",
        amount=2000,
        source="Job 1",
        is_active=True,
    )


@pytest.fixture
def inactive_config() -> PayPeriodConfig:
    return PayPeriodConfig(
        id="test-2",
        frequency="monthly",
        start_date="2024-01-01",
        amount=1500,
        source="Old job",
        is_active=False,
    )


@pytest.fixture
def weekly_config() -> PayPeriodConfig:
    return PayPeriodConfig(
        id="A",
        frequency="weekly",
        start_date="2024-01-01",
        amount=500,
        source="Side gig",
    )


@pytest.fixture
def monthly_config() -> PayPeriodConfig:
    return PayPeriodConfig(
        id="B",
        frequency="monthly",
        start_date="2024-01-05",
        amount=3000,
        source="Salary",
    )
