"""Pay date and HMRC deadline preview endpoints.

These run the deadline engine directly and never touch the database.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from bureau_payroll.api.schemas import (
    ErrorResponse,
    PlannedRunResponse,
    SchedulePreviewRequest,
    SchedulePreviewResponse,
    TaxMonthResponse,
)
from bureau_payroll.deadlines import (
    ConfigurationError,
    parse_frequency,
    plan_schedule,
    tax_month,
    tax_year_start,
)

router = APIRouter(prefix="/deadlines", tags=["deadlines"])


@router.post(
    "/preview",
    response_model=SchedulePreviewResponse,
    responses={422: {"model": ErrorResponse}},
)
async def preview_schedule(payload: SchedulePreviewRequest) -> SchedulePreviewResponse:
    """Preview the next pay dates, periods and deadlines for a pay configuration."""
    try:
        frequency = parse_frequency(payload.pay_frequency)
        plans = plan_schedule(frequency, payload.pay_day, payload.after_date, payload.count)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"This client's payroll configuration is invalid: {e}",
        )

    return SchedulePreviewResponse(
        pay_frequency=frequency,
        pay_day=payload.pay_day,
        runs=[
            PlannedRunResponse(
                pay_date=plan.pay_date,
                period_start=plan.period_start,
                period_end=plan.period_end,
                tax_month=plan.tax_month,
                rti_due_date=plan.deadlines.rti_due,
                eps_due_date=plan.deadlines.eps_due,
                paye_due_date=plan.deadlines.paye_due,
            )
            for plan in plans
        ],
    )


@router.get("/tax-month", response_model=TaxMonthResponse)
async def lookup_tax_month(on: Annotated[date, Query()]) -> TaxMonthResponse:
    """Return the HMRC tax month and tax year start for a date."""
    return TaxMonthResponse(on=on, tax_month=tax_month(on), tax_year_start=tax_year_start(on))
