"""HMRC filing deadlines and pay-period bounds derived from a pay date.

Deadlines depend only on the pay date, never on the current date, so the
same run always reports the same deadlines.
"""

from __future__ import annotations

from datetime import date, timedelta

from bureau_payroll.deadlines.dates import first_of_month, last_of_month, to_calendar_date
from bureau_payroll.deadlines.rules import parse_frequency
from bureau_payroll.deadlines.tax_calendar import tax_month
from bureau_payroll.deadlines.types import DeadlineSet, PayFrequency, PayPeriod

EPS_DUE_DAY = 19
PAYE_DUE_DAY = 22  # electronic payment

# Days before the pay date that a non-monthly period starts.
PERIOD_DAYS_BACK: dict[PayFrequency, int] = {
    PayFrequency.WEEKLY: 6,
    PayFrequency.FORTNIGHTLY: 13,
    PayFrequency.FOUR_WEEKLY: 27,
}


def rti_due(pay_date: date) -> date:
    """The RTI Full Payment Submission is due on or before the pay date."""
    return to_calendar_date(pay_date)


def period_bounds(frequency: PayFrequency | str, pay_date: date) -> PayPeriod:
    """Return the pay period a run paid on ``pay_date`` covers.

    Monthly runs cover the whole calendar month of the pay date. Other
    frequencies cover a trailing window ending on the pay date.
    """
    freq = parse_frequency(frequency)
    pay_date = to_calendar_date(pay_date)

    if freq is PayFrequency.MONTHLY:
        return PayPeriod(first_of_month(pay_date), last_of_month(pay_date))
    return PayPeriod(pay_date - timedelta(days=PERIOD_DAYS_BACK[freq]), pay_date)


def following_month(month_of_tax_year: int, pay_date: date) -> tuple[int, int]:
    """Return (year, month) of the calendar month following a tax month.

    Tax month N ends on the 5th of calendar month ``(N + 3) % 12 + 1``, and
    that is the month its EPS and PAYE deadlines fall in. A pay date inside
    tax month N is either on/after the 6th of the month before, or on/before
    the 5th of that month itself, so the year only advances when the pay date
    is in December and the following month is January.
    """
    pay_date = to_calendar_date(pay_date)
    month = (month_of_tax_year + 3) % 12 + 1
    year = pay_date.year
    if month < pay_date.month:
        year += 1
    return year, month


def eps_due(pay_date: date) -> date:
    """EPS is due by the 19th of the month following the pay date's tax month."""
    pay_date = to_calendar_date(pay_date)
    year, month = following_month(tax_month(pay_date), pay_date)
    return date(year, month, EPS_DUE_DAY)


def paye_due(pay_date: date) -> date:
    """PAYE is due by the 22nd of the month following the pay date's tax month."""
    pay_date = to_calendar_date(pay_date)
    year, month = following_month(tax_month(pay_date), pay_date)
    return date(year, month, PAYE_DUE_DAY)


def deadline_set(pay_date: date) -> DeadlineSet:
    return DeadlineSet(
        rti_due=rti_due(pay_date),
        eps_due=eps_due(pay_date),
        paye_due=paye_due(pay_date),
    )
