"""API routes."""

from bureau_payroll.api.routes.clients import router as clients_router
from bureau_payroll.api.routes.dashboard import router as dashboard_router
from bureau_payroll.api.routes.deadlines import router as deadlines_router
from bureau_payroll.api.routes.health import router as health_router
from bureau_payroll.api.routes.payroll_runs import router as payroll_runs_router

__all__ = [
    "clients_router",
    "dashboard_router",
    "deadlines_router",
    "health_router",
    "payroll_runs_router",
]
