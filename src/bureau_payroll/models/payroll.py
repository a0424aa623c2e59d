"""Payroll run and checklist item models."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bureau_payroll.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from bureau_payroll.models.client import Client


class PayrollRun(Base, TimestampMixin):
    """A single pay date for a client.

    Status is not stored. It is derived from the checklist items on every
    read.
    """

    __tablename__ = "payroll_run"

    payroll_run_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("client.client_id", ondelete="CASCADE"),
        nullable=False,
    )
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
    pay_date: Mapped[date] = mapped_column(Date, nullable=False)
    rti_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    eps_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("client_id", "pay_date", name="payroll_run_client_pay_date_unique"),
        CheckConstraint("period_end >= period_start", name="payroll_run_dates_check"),
    )

    # Relationships
    client: Mapped[Client] = relationship()
    checklist_items: Mapped[list[ChecklistItem]] = relationship(
        back_populates="payroll_run",
        order_by="ChecklistItem.sort_order",
        cascade="all, delete-orphan",
    )

    @property
    def total_items(self) -> int:
        return len(self.checklist_items)

    @property
    def completed_items(self) -> int:
        return sum(1 for item in self.checklist_items if item.is_completed)

    @property
    def last_completed_at(self) -> datetime | None:
        stamps = [i.completed_at for i in self.checklist_items if i.completed_at is not None]
        return max(stamps) if stamps else None


class ChecklistItem(Base):
    """A step of a payroll run, copied from the client's templates."""

    __tablename__ = "checklist_item"

    checklist_item_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    payroll_run_id: Mapped[UUID] = mapped_column(
        ForeignKey("payroll_run.payroll_run_id", ondelete="CASCADE"),
        nullable=False,
    )
    template_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("checklist_template.checklist_template_id", ondelete="SET NULL"),
        nullable=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by: Mapped[UUID | None] = mapped_column(nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    payroll_run: Mapped[PayrollRun] = relationship(back_populates="checklist_items")
