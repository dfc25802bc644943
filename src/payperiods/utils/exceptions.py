"""Custom exceptions for payperiods."""

from __future__ import annotations


class PayPeriodError(Exception):
    """Base exception for payperiods."""


class InvalidDateFormat(PayPeriodError):
    """A date or month string is not a parseable calendar value."""

    def __init__(self, value: object, expected: str = "YYYY-MM-DD") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid date {value!r}, expected {expected}")


class MalformedConfigJSON(PayPeriodError):
    """A persisted settings blob could not be parsed."""


class RangeTooLarge(PayPeriodError):
    """Range aggregation would walk more periods than allowed."""

    def __init__(self, config_id: str, max_iterations: int) -> None:
        self.config_id = config_id
        self.max_iterations = max_iterations
        super().__init__(
            f"Income range for config {config_id!r} spans more than "
            f"{max_iterations} periods"
        )
