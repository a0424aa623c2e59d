"""Tests for PayrollRunService and ClientService against SQLite."""

from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from bureau_payroll.deadlines import ConfigurationError, RunStatus
from bureau_payroll.models import Client
from bureau_payroll.services import (
    ChecklistItemNotFoundError,
    ChecklistStep,
    ClientNotFoundError,
    ClientService,
    DuplicatePayrollRunError,
    PayrollRunNotFoundError,
    PayrollRunService,
)

NOW = datetime(2026, 1, 20, 10, 0, tzinfo=timezone.utc)


class TestClientService:
    async def test_create_client_stores_normalized_config(self, session, tenant_id):
        client = await ClientService(session).create_client(
            tenant_id=tenant_id,
            name="Northwind Ltd",
            pay_frequency="Monthly",
            pay_day=" LAST_FRIDAY ",
            checklist=[ChecklistStep("Approve", 2), ChecklistStep("Import hours", 1)],
        )

        loaded = await ClientService(session).get_client(tenant_id, client.client_id)
        assert loaded.pay_frequency == "monthly"
        assert loaded.pay_day == "last_friday"
        assert [t.name for t in loaded.checklist_templates] == ["Import hours", "Approve"]

    async def test_invalid_pay_day_is_rejected(self, session, tenant_id):
        with pytest.raises(ConfigurationError):
            await ClientService(session).create_client(
                tenant_id=tenant_id,
                name="Broken Config Ltd",
                pay_frequency="weekly",
                pay_day="32",
                checklist=[ChecklistStep("Run", 1)],
            )

    async def test_client_of_other_tenant_is_not_found(self, session, monthly_client):
        with pytest.raises(ClientNotFoundError):
            await ClientService(session).get_client(uuid4(), monthly_client.client_id)


class TestGenerateNextRun:
    async def test_first_run_is_planned_from_today(self, session, tenant_id, monthly_client):
        run = await PayrollRunService(session).generate_next_run(
            tenant_id, monthly_client.client_id, today=date(2026, 1, 1)
        )

        assert run.pay_date == date(2026, 1, 30)
        assert run.period_start == date(2026, 1, 1)
        assert run.period_end == date(2026, 1, 31)
        assert run.rti_due_date == date(2026, 1, 30)
        assert run.eps_due_date == date(2026, 2, 19)
        assert [i.name for i in run.checklist_items] == [
            "Collect timesheets",
            "Process payroll",
            "Submit FPS",
        ]
        assert not any(i.is_completed for i in run.checklist_items)

    async def test_next_run_follows_latest_pay_date(self, session, tenant_id, monthly_client):
        service = PayrollRunService(session)
        await service.generate_next_run(tenant_id, monthly_client.client_id, today=date(2026, 1, 1))
        second = await service.generate_next_run(
            tenant_id, monthly_client.client_id, today=date(2026, 1, 1)
        )

        assert second.pay_date == date(2026, 2, 27)
        assert second.period_start == date(2026, 2, 1)

    async def test_weekly_runs_step_a_week(self, session, tenant_id, weekly_client):
        service = PayrollRunService(session)
        pay_dates = []
        for _ in range(3):
            run = await service.generate_next_run(
                tenant_id, weekly_client.client_id, today=date(2026, 2, 2)
            )
            pay_dates.append(run.pay_date)

        assert pay_dates == [date(2026, 2, 6), date(2026, 2, 13), date(2026, 2, 20)]

    async def test_inactive_templates_are_skipped(self, session, tenant_id, monthly_client):
        monthly_client.checklist_templates[1].is_active = False
        await session.commit()

        run = await PayrollRunService(session).generate_next_run(
            tenant_id, monthly_client.client_id, today=date(2026, 1, 1)
        )
        assert [i.name for i in run.checklist_items] == ["Collect timesheets", "Submit FPS"]

    async def test_unknown_client(self, session, tenant_id):
        with pytest.raises(ClientNotFoundError):
            await PayrollRunService(session).generate_next_run(
                tenant_id, uuid4(), today=date(2026, 1, 1)
            )

    async def test_client_of_other_tenant(self, session, monthly_client):
        with pytest.raises(ClientNotFoundError):
            await PayrollRunService(session).generate_next_run(
                uuid4(), monthly_client.client_id, today=date(2026, 1, 1)
            )

    async def test_missing_pay_configuration(self, session, tenant_id):
        client = Client(tenant_id=tenant_id, name="Unconfigured Ltd")
        session.add(client)
        await session.commit()

        with pytest.raises(ConfigurationError, match="missing pay frequency or pay day"):
            await PayrollRunService(session).generate_next_run(
                tenant_id, client.client_id, today=date(2026, 1, 1)
            )

    async def test_invalid_stored_configuration(self, session, tenant_id):
        client = Client(tenant_id=tenant_id, name="Legacy Ltd", pay_frequency="monthly", pay_day="friday")
        session.add(client)
        await session.commit()

        with pytest.raises(ConfigurationError):
            await PayrollRunService(session).generate_next_run(
                tenant_id, client.client_id, today=date(2026, 1, 1)
            )

    async def test_concurrent_duplicate_is_reported(
        self, session, tenant_id, monthly_client, monkeypatch
    ):
        """Two requests planning the same pay date: the second one is rejected."""
        from bureau_payroll.deadlines import plan_next_run
        from bureau_payroll.services import payroll_run_service

        fixed_plan = plan_next_run("monthly", "last_friday", date(2026, 1, 1))
        monkeypatch.setattr(payroll_run_service, "plan_next_run", lambda *args: fixed_plan)

        service = PayrollRunService(session)
        await service.generate_next_run(tenant_id, monthly_client.client_id, today=date(2026, 1, 1))

        with pytest.raises(DuplicatePayrollRunError) as exc_info:
            await service.generate_next_run(
                tenant_id, monthly_client.client_id, today=date(2026, 1, 1)
            )
        assert exc_info.value.pay_date == date(2026, 1, 30)


class TestChecklistAndStatus:
    @pytest.fixture
    async def run(self, session, tenant_id, monthly_client):
        return await PayrollRunService(session).generate_next_run(
            tenant_id, monthly_client.client_id, today=date(2026, 1, 1)
        )

    async def test_status_follows_checklist(self, session, tenant_id, run):
        service = PayrollRunService(session)
        far_before = date(2026, 1, 5)
        assert service.status_for(run, far_before) is RunStatus.NOT_STARTED
        assert service.status_for(run, date(2026, 1, 27)) is RunStatus.DUE_SOON

        first = run.checklist_items[0]
        run = await service.set_checklist_item(
            tenant_id, run.payroll_run_id, first.checklist_item_id, True, now=NOW
        )
        assert run.completed_items == 1
        assert run.checklist_items[0].completed_at == NOW
        assert service.status_for(run, far_before) is RunStatus.IN_PROGRESS
        assert service.status_for(run, date(2026, 2, 2)) is RunStatus.OVERDUE

        for item in run.checklist_items[1:]:
            run = await service.set_checklist_item(
                tenant_id, run.payroll_run_id, item.checklist_item_id, True, now=NOW
            )
        assert service.status_for(run, date(2026, 2, 2)) is RunStatus.COMPLETE

    async def test_unticking_clears_completion(self, session, tenant_id, run):
        service = PayrollRunService(session)
        item_id = run.checklist_items[0].checklist_item_id
        await service.set_checklist_item(tenant_id, run.payroll_run_id, item_id, True, now=NOW)
        run = await service.set_checklist_item(
            tenant_id, run.payroll_run_id, item_id, False, now=NOW
        )

        assert run.completed_items == 0
        assert run.checklist_items[0].completed_at is None
        assert run.last_completed_at is None

    async def test_due_soon_window_is_configurable(self, session, tenant_id, run):
        service = PayrollRunService(session, due_soon_days=10)
        assert service.status_for(run, date(2026, 1, 20)) is RunStatus.DUE_SOON

    async def test_unknown_item(self, session, tenant_id, run):
        with pytest.raises(ChecklistItemNotFoundError):
            await PayrollRunService(session).set_checklist_item(
                tenant_id, run.payroll_run_id, uuid4(), True, now=NOW
            )

    async def test_unknown_run(self, session, tenant_id):
        with pytest.raises(PayrollRunNotFoundError):
            await PayrollRunService(session).get_run(tenant_id, uuid4())

    async def test_list_runs_filters_by_client(
        self, session, tenant_id, run, weekly_client
    ):
        service = PayrollRunService(session)
        await service.generate_next_run(tenant_id, weekly_client.client_id, today=date(2026, 1, 1))

        assert len(await service.list_runs(tenant_id)) == 2
        only_weekly = await service.list_runs(tenant_id, client_id=weekly_client.client_id)
        assert [r.pay_date for r in only_weekly] == [date(2026, 1, 2)]
        assert await service.list_runs(uuid4()) == []
