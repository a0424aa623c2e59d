"""Client onboarding with pay configuration validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bureau_payroll.deadlines import ConfigurationError, parse_frequency, parse_pay_day_rule
from bureau_payroll.models import ChecklistTemplate, Client
from bureau_payroll.services.errors import ClientNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class ChecklistStep:
    """A checklist step supplied during onboarding."""

    name: str
    sort_order: int


class ClientService:
    """Creates and loads bureau clients."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_client(
        self,
        tenant_id: UUID,
        name: str,
        pay_frequency: str,
        pay_day: str,
        checklist: list[ChecklistStep],
        paye_reference: str | None = None,
        accounts_office_ref: str | None = None,
    ) -> Client:
        """Create a client and its checklist templates.

        The pay configuration is parsed by the deadline engine before anything
        is written, so an unusable configuration is never stored.

        Raises:
            ConfigurationError: If the frequency or pay day is invalid
        """
        try:
            frequency = parse_frequency(pay_frequency)
            parse_pay_day_rule(frequency, pay_day)
        except ConfigurationError as e:
            logger.warning("Rejected pay configuration for client %r: %s", name, e)
            raise

        client = Client(
            tenant_id=tenant_id,
            name=name,
            paye_reference=paye_reference,
            accounts_office_ref=accounts_office_ref,
            pay_frequency=frequency.value,
            pay_day=pay_day.strip().lower(),
        )
        client.checklist_templates = [
            ChecklistTemplate(name=step.name, sort_order=step.sort_order)
            for step in sorted(checklist, key=lambda s: s.sort_order)
        ]
        self.session.add(client)
        await self.session.commit()

        logger.info("Created client %s (%s, %s)", client.client_id, client.pay_frequency, client.pay_day)
        return client

    async def get_client(self, tenant_id: UUID, client_id: UUID) -> Client:
        """Load a tenant's client with its checklist templates."""
        result = await self.session.execute(
            select(Client)
            .where(Client.client_id == client_id, Client.tenant_id == tenant_id)
            .options(selectinload(Client.checklist_templates))
        )
        client = result.scalar_one_or_none()
        if client is None:
            raise ClientNotFoundError(client_id)
        return client
