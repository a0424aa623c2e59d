"""Value types for the pay-date and HMRC deadline engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Union

# Calendar dates are plain ``datetime.date`` values; see dates.to_calendar_date.
CalendarDate = date


class PayFrequency(str, Enum):
    """Supported pay frequencies."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    FOUR_WEEKLY = "four_weekly"
    MONTHLY = "monthly"

    @property
    def is_weekday_based(self) -> bool:
        """Weekly, fortnightly and four-weekly pay on a named weekday."""
        return self is not PayFrequency.MONTHLY


class RunStatus(str, Enum):
    """Display status of a payroll run, derived on every read."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
    COMPLETE = "complete"


# ===== Pay-day rules =====


@dataclass(frozen=True)
class Weekday:
    """Pay on a weekday (0=Monday ... 6=Sunday)."""

    weekday: int


@dataclass(frozen=True)
class DayOfMonth:
    """Pay on a numeric day of the month, clamped to the month's length."""

    day: int


@dataclass(frozen=True)
class LastWeekday:
    """Pay on the last occurrence of a weekday in the month."""

    weekday: int


PayDayRule = Union[Weekday, DayOfMonth, LastWeekday]


# ===== Results =====


@dataclass(frozen=True)
class PayPeriod:
    """Inclusive date window covered by a pay run."""

    period_start: date
    period_end: date

    def __contains__(self, day: date) -> bool:
        return self.period_start <= day <= self.period_end

    @property
    def days(self) -> int:
        return (self.period_end - self.period_start).days + 1


@dataclass(frozen=True)
class DeadlineSet:
    """HMRC deadlines derived from a pay date."""

    rti_due: date
    eps_due: date
    paye_due: date


@dataclass(frozen=True)
class PayrollRunPlan:
    """Everything needed to persist the next payroll run for a client."""

    frequency: PayFrequency
    pay_date: date
    period: PayPeriod
    deadlines: DeadlineSet
    tax_month: int

    @property
    def period_start(self) -> date:
        return self.period.period_start

    @property
    def period_end(self) -> date:
        return self.period.period_end
