"""Derivation of a payroll run's display status from its checklist."""

from __future__ import annotations

from datetime import date

from bureau_payroll.deadlines.dates import days_until, to_calendar_date
from bureau_payroll.deadlines.types import RunStatus

DUE_SOON_DAYS = 5


def derive_run_status(
    pay_date: date,
    total_items: int,
    completed_items: int,
    today: date,
    due_soon_days: int = DUE_SOON_DAYS,
) -> RunStatus:
    """Derive the status of a payroll run.

    The rules are evaluated in this order and the first match wins:

    1. complete: at least one item and every item done
    2. overdue: pay date before today with items outstanding
    3. due_soon: pay date within ``due_soon_days`` and nothing done
    4. in_progress: pay date within ``due_soon_days`` and something done
    5. in_progress: some, but not all, items done
    6. not_started: otherwise

    The order is part of the contract. A run with no checklist items and a
    near (or past) pay date reads as due_soon, not not_started.

    Status is never stored; callers derive it on every read from the live
    checklist counts.
    """
    pay_date = to_calendar_date(pay_date)
    today = to_calendar_date(today)

    if total_items > 0 and completed_items == total_items:
        return RunStatus.COMPLETE

    if pay_date < today and completed_items < total_items:
        return RunStatus.OVERDUE

    remaining = days_until(pay_date, today)

    if remaining <= due_soon_days and completed_items == 0:
        return RunStatus.DUE_SOON

    if remaining <= due_soon_days and completed_items > 0:
        return RunStatus.IN_PROGRESS

    if 0 < completed_items < total_items:
        return RunStatus.IN_PROGRESS

    return RunStatus.NOT_STARTED
