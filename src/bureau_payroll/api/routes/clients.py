"""Client onboarding endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, status

from bureau_payroll.api.dependencies import DbSession, TenantId
from bureau_payroll.api.schemas import ClientCreate, ClientResponse, ErrorResponse
from bureau_payroll.deadlines import ConfigurationError
from bureau_payroll.services import ChecklistStep, ClientNotFoundError, ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_client(
    db: DbSession,
    tenant_id: TenantId,
    payload: ClientCreate,
) -> ClientResponse:
    """Onboard a client with its pay configuration and checklist."""
    service = ClientService(db)
    try:
        client = await service.create_client(
            tenant_id=tenant_id,
            name=payload.name,
            pay_frequency=payload.pay_frequency.value,
            pay_day=payload.pay_day,
            checklist=[
                ChecklistStep(name=step.name, sort_order=step.sort_order)
                for step in payload.checklist_items
            ],
            paye_reference=payload.paye_reference,
            accounts_office_ref=payload.accounts_office_ref,
        )
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"This client's payroll configuration is invalid: {e}",
        )
    return ClientResponse.model_validate(client)


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_client(
    db: DbSession,
    tenant_id: TenantId,
    client_id: Annotated[UUID, Path()],
) -> ClientResponse:
    """Get a specific client by ID."""
    try:
        client = await ClientService(db).get_client(tenant_id, client_id)
    except ClientNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found",
        )
    return ClientResponse.model_validate(client)
