"""Pydantic schemas for API request/response models."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bureau_payroll.deadlines import PayFrequency, RunStatus


class ErrorResponse(BaseModel):
    """Error response body."""

    detail: str
    code: str | None = None


# ============================================================================
# Client schemas
# ============================================================================


class ChecklistStepCreate(BaseModel):
    """A checklist step supplied during onboarding."""

    name: str = Field(min_length=1, max_length=255)
    sort_order: int


class ClientCreate(BaseModel):
    """Schema for onboarding a client."""

    name: str = Field(min_length=1, max_length=255)
    paye_reference: str | None = None
    accounts_office_ref: str | None = None
    pay_frequency: PayFrequency
    pay_day: str = Field(min_length=1)
    checklist_items: list[ChecklistStepCreate] = Field(min_length=1)


class ChecklistTemplateResponse(BaseModel):
    """Schema for a checklist template."""

    model_config = ConfigDict(from_attributes=True)

    checklist_template_id: UUID
    name: str
    sort_order: int
    is_active: bool


class ClientResponse(BaseModel):
    """Schema for client response."""

    model_config = ConfigDict(from_attributes=True)

    client_id: UUID
    tenant_id: UUID
    name: str
    paye_reference: str | None = None
    accounts_office_ref: str | None = None
    pay_frequency: str | None = None
    pay_day: str | None = None
    checklist_templates: list[ChecklistTemplateResponse] = []


# ============================================================================
# Payroll run schemas
# ============================================================================


class GeneratePayrollRunRequest(BaseModel):
    """Schema for generating the next payroll run of a client."""

    client_id: UUID


class ChecklistItemUpdate(BaseModel):
    """Schema for ticking or unticking a checklist item."""

    is_completed: bool
    completed_by: UUID | None = None


class ChecklistItemResponse(BaseModel):
    """Schema for checklist item response."""

    model_config = ConfigDict(from_attributes=True)

    checklist_item_id: UUID
    template_id: UUID | None = None
    name: str
    is_completed: bool
    sort_order: int


class PayrollRunResponse(BaseModel):
    """Schema for payroll run response.

    ``status`` and ``paye_due_date`` are computed on every read.
    """

    model_config = ConfigDict(from_attributes=True)

    payroll_run_id: UUID
    client_id: UUID
    tenant_id: UUID
    client_name: str | None = None
    period_start: date
    period_end: date
    pay_date: date
    rti_due_date: date | None = None
    eps_due_date: date | None = None
    paye_due_date: date
    status: RunStatus
    total_items: int
    completed_items: int
    checklist_items: list[ChecklistItemResponse]


class PayrollRunListResponse(BaseModel):
    """Schema for listing payroll runs."""

    items: list[PayrollRunResponse]
    total: int


# ============================================================================
# Dashboard schemas
# ============================================================================


class UpcomingDeadlineResponse(BaseModel):
    """Schema for an upcoming HMRC deadline."""

    model_config = ConfigDict(from_attributes=True)

    client_name: str
    deadline_type: str
    due_date: date
    payroll_run_id: UUID


class DashboardStatsResponse(BaseModel):
    """Schema for dashboard statistics."""

    model_config = ConfigDict(from_attributes=True)

    total_clients: int
    due_this_week: int
    overdue: int
    completed_this_month: int
    upcoming_deadlines: list[UpcomingDeadlineResponse]


# ============================================================================
# Deadline preview schemas
# ============================================================================


class SchedulePreviewRequest(BaseModel):
    """Schema for previewing upcoming pay dates and deadlines."""

    pay_frequency: str
    pay_day: str
    after_date: date
    count: int = Field(default=6, ge=1, le=60)


class PlannedRunResponse(BaseModel):
    """Schema for a planned payroll run."""

    pay_date: date
    period_start: date
    period_end: date
    tax_month: int
    rti_due_date: date
    eps_due_date: date
    paye_due_date: date


class SchedulePreviewResponse(BaseModel):
    """Schema for a schedule preview."""

    pay_frequency: PayFrequency
    pay_day: str
    runs: list[PlannedRunResponse]


class TaxMonthResponse(BaseModel):
    """Schema for a tax month lookup."""

    on: date
    tax_month: int
    tax_year_start: date
