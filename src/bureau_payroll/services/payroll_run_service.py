"""Payroll run service - generation and checklist tracking."""

from __future__ import annotations

import logging
from datetime import date, datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bureau_payroll.deadlines import (
    ConfigurationError,
    PayrollRunPlan,
    RunStatus,
    derive_run_status,
    plan_next_run,
)
from bureau_payroll.deadlines.run_status import DUE_SOON_DAYS
from bureau_payroll.models import ChecklistItem, ChecklistTemplate, Client, PayrollRun
from bureau_payroll.services.errors import (
    ChecklistItemNotFoundError,
    ClientNotFoundError,
    DuplicatePayrollRunError,
    PayrollRunNotFoundError,
)

logger = logging.getLogger(__name__)


class PayrollRunService:
    """Service for generating payroll runs and tracking their checklists.

    Operations:
    - generate_next_run: Plan the client's next pay date and persist the run
    - get_run / list_runs: Load runs with their checklist items
    - set_checklist_item: Tick or untick a checklist step
    - status_for: Derive a run's status from its live checklist counts
    """

    def __init__(self, session: AsyncSession, due_soon_days: int = DUE_SOON_DAYS):
        self.session = session
        self.due_soon_days = due_soon_days

    async def generate_next_run(
        self,
        tenant_id: UUID,
        client_id: UUID,
        today: date,
    ) -> PayrollRun:
        """Create the run following the client's latest pay date.

        When the client has no runs yet the next pay date is planned from
        ``today``. Active checklist templates are copied onto the new run in
        sort order.

        Raises:
            ClientNotFoundError: If the client is not the tenant's
            ConfigurationError: If the client's pay configuration is missing
                or invalid
            DuplicatePayrollRunError: If a run already exists on that pay date
        """
        client = await self._get_client(tenant_id, client_id)
        plan = await self.plan_for_client(client, today)

        templates = await self.session.execute(
            select(ChecklistTemplate)
            .where(
                ChecklistTemplate.client_id == client.client_id,
                ChecklistTemplate.is_active.is_(True),
            )
            .order_by(ChecklistTemplate.sort_order)
        )

        run = PayrollRun(
            client=client,
            tenant_id=tenant_id,
            period_start=plan.period_start,
            period_end=plan.period_end,
            pay_date=plan.pay_date,
            rti_due_date=plan.deadlines.rti_due,
            eps_due_date=plan.deadlines.eps_due,
        )
        run.checklist_items = [
            ChecklistItem(
                template_id=template.checklist_template_id,
                name=template.name,
                sort_order=template.sort_order,
                is_completed=False,
            )
            for template in templates.scalars()
        ]
        self.session.add(run)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning(
                "Payroll run for client %s on %s already exists", client_id, plan.pay_date
            )
            raise DuplicatePayrollRunError(client_id, plan.pay_date) from None

        logger.info(
            "Generated payroll run %s for client %s: pay date %s, period %s to %s, %d checklist items",
            run.payroll_run_id,
            client.client_id,
            run.pay_date,
            run.period_start,
            run.period_end,
            len(run.checklist_items),
        )
        return run

    async def plan_for_client(self, client: Client, today: date) -> PayrollRunPlan:
        """Plan the client's next run without persisting anything."""
        if not client.pay_frequency or not client.pay_day:
            logger.warning("Client %s is missing pay frequency or pay day", client.client_id)
            raise ConfigurationError(
                "pay_day" if client.pay_frequency else "pay_frequency",
                None,
                "client is missing pay frequency or pay day configuration",
            )

        last_pay_date = await self.session.scalar(
            select(func.max(PayrollRun.pay_date)).where(PayrollRun.client_id == client.client_id)
        )
        try:
            return plan_next_run(client.pay_frequency, client.pay_day, last_pay_date or today)
        except ConfigurationError as e:
            logger.warning("Invalid pay configuration for client %s: %s", client.client_id, e)
            raise

    async def get_run(self, tenant_id: UUID, payroll_run_id: UUID) -> PayrollRun:
        """Load a tenant's run with its checklist items and client."""
        result = await self.session.execute(
            select(PayrollRun)
            .where(
                PayrollRun.payroll_run_id == payroll_run_id,
                PayrollRun.tenant_id == tenant_id,
            )
            .options(selectinload(PayrollRun.checklist_items), selectinload(PayrollRun.client))
        )
        run = result.scalar_one_or_none()
        if run is None:
            raise PayrollRunNotFoundError(payroll_run_id)
        return run

    async def list_runs(
        self,
        tenant_id: UUID,
        client_id: UUID | None = None,
    ) -> list[PayrollRun]:
        """List a tenant's runs ordered by pay date."""
        query = (
            select(PayrollRun)
            .where(PayrollRun.tenant_id == tenant_id)
            .options(selectinload(PayrollRun.checklist_items), selectinload(PayrollRun.client))
            .order_by(PayrollRun.pay_date)
        )
        if client_id is not None:
            query = query.where(PayrollRun.client_id == client_id)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def set_checklist_item(
        self,
        tenant_id: UUID,
        payroll_run_id: UUID,
        checklist_item_id: UUID,
        is_completed: bool,
        now: datetime,
        completed_by: UUID | None = None,
    ) -> PayrollRun:
        """Mark a checklist item done or not done and return the run."""
        run = await self.get_run(tenant_id, payroll_run_id)
        item = next(
            (i for i in run.checklist_items if i.checklist_item_id == checklist_item_id),
            None,
        )
        if item is None:
            raise ChecklistItemNotFoundError(payroll_run_id, checklist_item_id)

        item.is_completed = is_completed
        item.completed_at = now if is_completed else None
        item.completed_by = completed_by if is_completed else None
        await self.session.commit()

        logger.info(
            "Checklist item %s on run %s set to %s (%d/%d complete)",
            checklist_item_id,
            payroll_run_id,
            "done" if is_completed else "not done",
            run.completed_items,
            run.total_items,
        )
        return run

    def status_for(self, run: PayrollRun, today: date) -> RunStatus:
        """Derive the run's status from its checklist items."""
        return derive_run_status(
            run.pay_date,
            run.total_items,
            run.completed_items,
            today,
            due_soon_days=self.due_soon_days,
        )

    async def _get_client(self, tenant_id: UUID, client_id: UUID) -> Client:
        client = await self.session.scalar(
            select(Client).where(Client.client_id == client_id, Client.tenant_id == tenant_id)
        )
        if client is None:
            raise ClientNotFoundError(client_id)
        return client
