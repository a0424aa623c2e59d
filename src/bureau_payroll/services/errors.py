"""Service-level exceptions."""

from __future__ import annotations

from datetime import date
from uuid import UUID


class BureauPayrollError(Exception):
    """Base exception for service errors."""


class ClientNotFoundError(BureauPayrollError):
    """Raised when a client does not exist for the tenant."""

    def __init__(self, client_id: UUID):
        self.client_id = client_id
        super().__init__(f"Client {client_id} not found")


class PayrollRunNotFoundError(BureauPayrollError):
    """Raised when a payroll run does not exist for the tenant."""

    def __init__(self, payroll_run_id: UUID):
        self.payroll_run_id = payroll_run_id
        super().__init__(f"Payroll run {payroll_run_id} not found")


class ChecklistItemNotFoundError(BureauPayrollError):
    """Raised when a checklist item is not part of the payroll run."""

    def __init__(self, payroll_run_id: UUID, checklist_item_id: UUID):
        self.payroll_run_id = payroll_run_id
        self.checklist_item_id = checklist_item_id
        super().__init__(
            f"Checklist item {checklist_item_id} not found on payroll run {payroll_run_id}"
        )


class DuplicatePayrollRunError(BureauPayrollError):
    """Raised when a run already exists for the client's next pay date."""

    def __init__(self, client_id: UUID, pay_date: date):
        self.client_id = client_id
        self.pay_date = pay_date
        super().__init__(f"Client {client_id} already has a payroll run on {pay_date}")
