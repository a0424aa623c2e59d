"""UK HMRC tax-month calendar.

Tax month 1 runs 6 April - 5 May, tax month 2 runs 6 May - 5 June, and so on
through tax month 12, 6 March - 5 April.
"""

from __future__ import annotations

from datetime import date

from bureau_payroll.deadlines.dates import to_calendar_date

TAX_MONTH_START_DAY = 6
TAX_YEAR_START_MONTH = 4  # April


def tax_month(day: date) -> int:
    """Return the HMRC tax month (1-12) containing ``day``.

    Before the 6th a date still belongs to the tax month that started in the
    previous calendar month.
    """
    day = to_calendar_date(day)
    effective_month = day.month if day.day >= TAX_MONTH_START_DAY else (day.month - 2) % 12 + 1
    return (effective_month - TAX_YEAR_START_MONTH) % 12 + 1


def tax_year_start(day: date) -> date:
    """Return the 6 April that opens the tax year containing ``day``."""
    day = to_calendar_date(day)
    start = date(day.year, TAX_YEAR_START_MONTH, TAX_MONTH_START_DAY)
    if day < start:
        start = start.replace(year=day.year - 1)
    return start
