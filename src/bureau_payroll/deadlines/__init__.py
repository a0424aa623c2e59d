"""UK payroll pay-date and HMRC deadline engine.

Pure functions over ``datetime.date`` values. Nothing here reads the clock,
touches storage, or keeps state between calls.
"""

from bureau_payroll.deadlines.dates import to_calendar_date
from bureau_payroll.deadlines.errors import ConfigurationError
from bureau_payroll.deadlines.hmrc import (
    deadline_set,
    eps_due,
    following_month,
    paye_due,
    period_bounds,
    rti_due,
)
from bureau_payroll.deadlines.pay_dates import iter_pay_dates, next_pay_date
from bureau_payroll.deadlines.rules import parse_frequency, parse_pay_day_rule
from bureau_payroll.deadlines.run_status import derive_run_status
from bureau_payroll.deadlines.schedule import plan_next_run, plan_schedule
from bureau_payroll.deadlines.tax_calendar import tax_month, tax_year_start
from bureau_payroll.deadlines.types import (
    DayOfMonth,
    DeadlineSet,
    LastWeekday,
    PayDayRule,
    PayFrequency,
    PayPeriod,
    PayrollRunPlan,
    RunStatus,
    Weekday,
)

__all__ = [
    "ConfigurationError",
    "DayOfMonth",
    "DeadlineSet",
    "LastWeekday",
    "PayDayRule",
    "PayFrequency",
    "PayPeriod",
    "PayrollRunPlan",
    "RunStatus",
    "Weekday",
    "deadline_set",
    "derive_run_status",
    "eps_due",
    "following_month",
    "iter_pay_dates",
    "next_pay_date",
    "parse_frequency",
    "parse_pay_day_rule",
    "paye_due",
    "period_bounds",
    "plan_next_run",
    "plan_schedule",
    "rti_due",
    "tax_month",
    "tax_year_start",
    "to_calendar_date",
]
