"""ORM models for clients, payroll runs and checklists."""

from bureau_payroll.models.base import Base, TimestampMixin
from bureau_payroll.models.client import ChecklistTemplate, Client
from bureau_payroll.models.payroll import ChecklistItem, PayrollRun

__all__ = [
    "Base",
    "TimestampMixin",
    "ChecklistItem",
    "ChecklistTemplate",
    "Client",
    "PayrollRun",
]
