"""Parsing of client pay configuration into engine types."""

from __future__ import annotations

from bureau_payroll.deadlines.errors import ConfigurationError
from bureau_payroll.deadlines.types import (
    DayOfMonth,
    LastWeekday,
    PayDayRule,
    PayFrequency,
    Weekday,
)

WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

LAST_PREFIX = "last_"


def parse_frequency(value: PayFrequency | str) -> PayFrequency:
    """Parse a stored pay frequency string.

    Raises:
        ConfigurationError: If the frequency is not one of the supported values
    """
    if isinstance(value, PayFrequency):
        return value
    if not isinstance(value, str):
        raise ConfigurationError("pay_frequency", value, "expected a string")
    try:
        return PayFrequency(value.strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in PayFrequency)
        raise ConfigurationError(
            "pay_frequency", value, f"expected one of {allowed}"
        ) from None


def parse_weekday(name: str, original: str | None = None) -> int:
    """Map a weekday name to its number (0=Monday ... 6=Sunday)."""
    weekday = WEEKDAYS.get(name.strip().lower())
    if weekday is None:
        raise ConfigurationError(
            "pay_day", name if original is None else original, "unrecognized weekday name"
        )
    return weekday


def parse_pay_day_rule(
    frequency: PayFrequency | str,
    value: PayDayRule | str,
) -> PayDayRule:
    """Parse a stored pay-day string for the given frequency.

    Weekly, fortnightly and four-weekly clients pay on a weekday name
    (``"friday"``). Monthly clients pay on a day of the month (``"1"`` to
    ``"31"``) or on the last occurrence of a weekday (``"last_friday"``).

    Raises:
        ConfigurationError: If the value is malformed, out of range, or does
            not suit the frequency
    """
    freq = parse_frequency(frequency)

    if isinstance(value, (Weekday, DayOfMonth, LastWeekday)):
        rule: PayDayRule = value
        _check_rule_range(rule, value)
    elif isinstance(value, str):
        rule = _parse_rule_text(value)
    else:
        raise ConfigurationError("pay_day", value, "expected a string")

    if freq.is_weekday_based and not isinstance(rule, Weekday):
        raise ConfigurationError(
            "pay_day", value, f"{freq.value} payroll requires a weekday name"
        )
    if not freq.is_weekday_based and isinstance(rule, Weekday):
        raise ConfigurationError(
            "pay_day",
            value,
            "monthly payroll requires a day of the month or last_<weekday>",
        )
    return rule


def _parse_rule_text(value: str) -> PayDayRule:
    text = value.strip().lower()
    if not text:
        raise ConfigurationError("pay_day", value, "pay day is required")

    if text.startswith(LAST_PREFIX):
        return LastWeekday(parse_weekday(text[len(LAST_PREFIX):], value))

    if text.isascii() and text.isdigit():
        rule = DayOfMonth(int(text))
        _check_rule_range(rule, value)
        return rule

    return Weekday(parse_weekday(text, value))


def _check_rule_range(rule: PayDayRule, original: object) -> None:
    if isinstance(rule, DayOfMonth):
        if not 1 <= rule.day <= 31:
            raise ConfigurationError(
                "pay_day", original, "day of month must be between 1 and 31"
            )
    elif not 0 <= rule.weekday <= 6:
        raise ConfigurationError("pay_day", original, "weekday must be between 0 and 6")
