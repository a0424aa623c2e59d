"""Bureau payroll services."""

from bureau_payroll.services.client_service import ChecklistStep, ClientService
from bureau_payroll.services.dashboard_service import (
    DashboardService,
    DashboardStats,
    UpcomingDeadline,
)
from bureau_payroll.services.errors import (
    BureauPayrollError,
    ChecklistItemNotFoundError,
    ClientNotFoundError,
    DuplicatePayrollRunError,
    PayrollRunNotFoundError,
)
from bureau_payroll.services.payroll_run_service import PayrollRunService

__all__ = [
    "BureauPayrollError",
    "ChecklistItemNotFoundError",
    "ChecklistStep",
    "ClientNotFoundError",
    "ClientService",
    "DashboardService",
    "DashboardStats",
    "DuplicatePayrollRunError",
    "PayrollRunNotFoundError",
    "PayrollRunService",
    "UpcomingDeadline",
]
