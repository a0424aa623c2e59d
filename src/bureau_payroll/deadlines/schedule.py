"""Planning of upcoming payroll runs for a client."""

from __future__ import annotations

from datetime import date

from bureau_payroll.deadlines.dates import to_calendar_date
from bureau_payroll.deadlines.hmrc import deadline_set, period_bounds
from bureau_payroll.deadlines.pay_dates import next_pay_date
from bureau_payroll.deadlines.rules import parse_frequency, parse_pay_day_rule
from bureau_payroll.deadlines.tax_calendar import tax_month
from bureau_payroll.deadlines.types import PayDayRule, PayFrequency, PayrollRunPlan


def plan_next_run(
    frequency: PayFrequency | str,
    pay_day: PayDayRule | str,
    last_pay_date: date,
) -> PayrollRunPlan:
    """Plan the run that follows ``last_pay_date``.

    Callers pass the latest persisted pay date, or today when the client has
    no runs yet.
    """
    freq = parse_frequency(frequency)
    pay_date = next_pay_date(freq, pay_day, last_pay_date)
    return PayrollRunPlan(
        frequency=freq,
        pay_date=pay_date,
        period=period_bounds(freq, pay_date),
        deadlines=deadline_set(pay_date),
        tax_month=tax_month(pay_date),
    )


def plan_schedule(
    frequency: PayFrequency | str,
    pay_day: PayDayRule | str,
    after: date,
    count: int,
) -> list[PayrollRunPlan]:
    """Plan ``count`` consecutive runs starting after ``after``."""
    freq = parse_frequency(frequency)
    rule = parse_pay_day_rule(freq, pay_day)
    plans: list[PayrollRunPlan] = []
    last = to_calendar_date(after)
    for _ in range(count):
        plan = plan_next_run(freq, rule, last)
        plans.append(plan)
        last = plan.pay_date
    return plans
