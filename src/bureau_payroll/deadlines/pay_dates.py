"""Resolution of the next pay date from a client's pay configuration."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from bureau_payroll.deadlines.dates import (
    add_months,
    clamped_day,
    last_weekday_of_month,
    to_calendar_date,
)
from bureau_payroll.deadlines.rules import parse_frequency, parse_pay_day_rule
from bureau_payroll.deadlines.types import (
    DayOfMonth,
    LastWeekday,
    PayDayRule,
    PayFrequency,
    Weekday,
)


def next_pay_date(
    frequency: PayFrequency | str,
    pay_day: PayDayRule | str,
    after: date,
) -> date:
    """Return the first pay date strictly after ``after``.

    Weekly, fortnightly and four-weekly payrolls pay on the next occurrence of
    the configured weekday; the cadence length only affects the pay period,
    not which date comes next. Monthly payrolls try the current month first
    and otherwise roll to the following month, clamping numeric days to the
    month's length.

    Raises:
        ConfigurationError: If the frequency or pay-day rule is invalid
    """
    freq = parse_frequency(frequency)
    rule = parse_pay_day_rule(freq, pay_day)
    after = to_calendar_date(after)

    if isinstance(rule, Weekday):
        return _next_weekday(rule.weekday, after)
    if isinstance(rule, DayOfMonth):
        return _next_month_day(after, lambda y, m: clamped_day(y, m, rule.day))
    if isinstance(rule, LastWeekday):
        return _next_month_day(
            after, lambda y, m: last_weekday_of_month(y, m, rule.weekday)
        )
    raise TypeError(f"Unsupported pay-day rule: {rule!r}")


def iter_pay_dates(
    frequency: PayFrequency | str,
    pay_day: PayDayRule | str,
    after: date,
    count: int,
) -> Iterator[date]:
    """Yield ``count`` successive pay dates, each strictly after the last."""
    freq = parse_frequency(frequency)
    rule = parse_pay_day_rule(freq, pay_day)
    current = to_calendar_date(after)
    for _ in range(count):
        current = next_pay_date(freq, rule, current)
        yield current


def _next_weekday(weekday: int, after: date) -> date:
    offset = weekday - after.weekday()
    if offset <= 0:
        offset += 7
    return after + timedelta(days=offset)


def _next_month_day(after: date, resolve) -> date:
    candidate = resolve(after.year, after.month)
    if candidate > after:
        return candidate
    year, month = add_months(after.year, after.month, 1)
    return resolve(year, month)
