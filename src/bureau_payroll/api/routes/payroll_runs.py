"""Payroll run API endpoints."""

from datetime import date, datetime, timezone
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, status

from bureau_payroll.api.dependencies import AppSettings, DbSession, TenantId, Today
from bureau_payroll.api.schemas import (
    ChecklistItemResponse,
    ChecklistItemUpdate,
    ErrorResponse,
    GeneratePayrollRunRequest,
    PayrollRunListResponse,
    PayrollRunResponse,
)
from bureau_payroll.deadlines import ConfigurationError, paye_due
from bureau_payroll.models import PayrollRun
from bureau_payroll.services import (
    ChecklistItemNotFoundError,
    ClientNotFoundError,
    DuplicatePayrollRunError,
    PayrollRunNotFoundError,
    PayrollRunService,
)

router = APIRouter(prefix="/payroll-runs", tags=["payroll-runs"])


def build_run_response(
    run: PayrollRun,
    service: PayrollRunService,
    today: date,
) -> PayrollRunResponse:
    """Build a response with status and PAYE due date derived as of ``today``."""
    return PayrollRunResponse(
        payroll_run_id=run.payroll_run_id,
        client_id=run.client_id,
        tenant_id=run.tenant_id,
        client_name=run.client.name if run.client is not None else None,
        period_start=run.period_start,
        period_end=run.period_end,
        pay_date=run.pay_date,
        rti_due_date=run.rti_due_date,
        eps_due_date=run.eps_due_date,
        paye_due_date=paye_due(run.pay_date),
        status=service.status_for(run, today),
        total_items=run.total_items,
        completed_items=run.completed_items,
        checklist_items=[
            ChecklistItemResponse.model_validate(item) for item in run.checklist_items
        ],
    )


# ============================================================================
# Generation
# ============================================================================


@router.post(
    "/generate",
    response_model=PayrollRunResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def generate_payroll_run(
    db: DbSession,
    tenant_id: TenantId,
    today: Today,
    settings: AppSettings,
    payload: GeneratePayrollRunRequest,
) -> PayrollRunResponse:
    """Generate the next payroll run for a client from its pay configuration."""
    service = PayrollRunService(db, due_soon_days=settings.due_soon_days)
    try:
        run = await service.generate_next_run(tenant_id, payload.client_id, today)
    except ClientNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"This client's payroll configuration is invalid: {e}",
        )
    except DuplicatePayrollRunError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return build_run_response(run, service, today)


# ============================================================================
# Queries
# ============================================================================


@router.get(
    "",
    response_model=PayrollRunListResponse,
    responses={400: {"model": ErrorResponse}},
)
async def list_payroll_runs(
    db: DbSession,
    tenant_id: TenantId,
    today: Today,
    settings: AppSettings,
    client_id: UUID | None = None,
) -> PayrollRunListResponse:
    """List payroll runs for a tenant, optionally for one client."""
    service = PayrollRunService(db, due_soon_days=settings.due_soon_days)
    runs = await service.list_runs(tenant_id, client_id=client_id)
    return PayrollRunListResponse(
        items=[build_run_response(run, service, today) for run in runs],
        total=len(runs),
    )


@router.get(
    "/{payroll_run_id}",
    response_model=PayrollRunResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_payroll_run(
    db: DbSession,
    tenant_id: TenantId,
    today: Today,
    settings: AppSettings,
    payroll_run_id: Annotated[UUID, Path()],
) -> PayrollRunResponse:
    """Get a specific payroll run by ID."""
    service = PayrollRunService(db, due_soon_days=settings.due_soon_days)
    try:
        run = await service.get_run(tenant_id, payroll_run_id)
    except PayrollRunNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payroll run not found",
        )
    return build_run_response(run, service, today)


# ============================================================================
# Checklist
# ============================================================================


@router.patch(
    "/{payroll_run_id}/checklist-items/{checklist_item_id}",
    response_model=PayrollRunResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_checklist_item(
    db: DbSession,
    tenant_id: TenantId,
    today: Today,
    settings: AppSettings,
    payroll_run_id: Annotated[UUID, Path()],
    checklist_item_id: Annotated[UUID, Path()],
    payload: ChecklistItemUpdate,
) -> PayrollRunResponse:
    """Tick or untick a checklist item and return the run's new status."""
    service = PayrollRunService(db, due_soon_days=settings.due_soon_days)
    try:
        run = await service.set_checklist_item(
            tenant_id,
            payroll_run_id,
            checklist_item_id,
            is_completed=payload.is_completed,
            now=datetime.now(timezone.utc),
            completed_by=payload.completed_by,
        )
    except (PayrollRunNotFoundError, ChecklistItemNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return build_run_response(run, service, today)
