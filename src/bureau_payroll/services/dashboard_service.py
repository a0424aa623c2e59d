"""Dashboard statistics for a bureau tenant."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bureau_payroll.deadlines import RunStatus, paye_due, to_calendar_date
from bureau_payroll.deadlines.dates import first_of_month
from bureau_payroll.deadlines.run_status import DUE_SOON_DAYS
from bureau_payroll.models import Client, PayrollRun
from bureau_payroll.services.payroll_run_service import PayrollRunService

DUE_THIS_WEEK_DAYS = 7
UPCOMING_WINDOW_DAYS = 14
UPCOMING_LIMIT = 10


@dataclass(frozen=True)
class UpcomingDeadline:
    """An HMRC deadline of a run paying soon."""

    client_name: str
    deadline_type: str  # 'FPS', 'EPS' or 'PAYE'
    due_date: date
    payroll_run_id: UUID


@dataclass
class DashboardStats:
    """Headline numbers for the dashboard."""

    total_clients: int = 0
    due_this_week: int = 0
    overdue: int = 0
    completed_this_month: int = 0
    upcoming_deadlines: list[UpcomingDeadline] = field(default_factory=list)


class DashboardService:
    """Aggregates run statuses and deadlines for a tenant.

    Every status is derived from live checklist counts, never read from a
    stored field.
    """

    def __init__(self, session: AsyncSession, due_soon_days: int = DUE_SOON_DAYS):
        self.session = session
        self.runs = PayrollRunService(session, due_soon_days=due_soon_days)

    async def stats(self, tenant_id: UUID, today: date) -> DashboardStats:
        today = to_calendar_date(today)
        week_end = today + timedelta(days=DUE_THIS_WEEK_DAYS)
        upcoming_end = today + timedelta(days=UPCOMING_WINDOW_DAYS)
        month_start = first_of_month(today)

        total_clients = await self.session.scalar(
            select(func.count()).select_from(Client).where(Client.tenant_id == tenant_id)
        )
        stats = DashboardStats(total_clients=total_clients or 0)

        for run in await self.runs.list_runs(tenant_id):
            status = self.runs.status_for(run, today)

            if status is RunStatus.COMPLETE:
                completed_at = run.last_completed_at
                if completed_at is not None and month_start <= to_calendar_date(completed_at) <= today:
                    stats.completed_this_month += 1
                continue

            if status is RunStatus.OVERDUE:
                stats.overdue += 1

            if today <= run.pay_date < week_end:
                stats.due_this_week += 1

            if today <= run.pay_date < upcoming_end:
                stats.upcoming_deadlines.extend(self._deadlines_for(run))

        stats.upcoming_deadlines.sort(key=lambda d: (d.due_date, d.deadline_type))
        del stats.upcoming_deadlines[UPCOMING_LIMIT:]
        return stats

    @staticmethod
    def _deadlines_for(run: PayrollRun) -> list[UpcomingDeadline]:
        client_name = run.client.name if run.client is not None else "Unknown Client"
        deadlines = []
        if run.rti_due_date is not None:
            deadlines.append(
                UpcomingDeadline(client_name, "FPS", run.rti_due_date, run.payroll_run_id)
            )
        if run.eps_due_date is not None:
            deadlines.append(
                UpcomingDeadline(client_name, "EPS", run.eps_due_date, run.payroll_run_id)
            )
        deadlines.append(
            UpcomingDeadline(client_name, "PAYE", paye_due(run.pay_date), run.payroll_run_id)
        )
        return deadlines
