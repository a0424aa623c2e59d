"""Bureau client and checklist template models."""

from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bureau_payroll.models.base import Base, TimestampMixin


class Client(Base, TimestampMixin):
    """An employer whose payroll the bureau runs."""

    __tablename__ = "client"

    client_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    tenant_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    paye_reference: Mapped[str | None] = mapped_column(String, nullable=True)
    accounts_office_ref: Mapped[str | None] = mapped_column(String, nullable=True)
    pay_frequency: Mapped[str | None] = mapped_column(String, nullable=True)
    pay_day: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "pay_frequency IN ('weekly', 'fortnightly', 'four_weekly', 'monthly')",
            name="client_pay_frequency_check",
        ),
    )

    # Relationships
    checklist_templates: Mapped[list[ChecklistTemplate]] = relationship(
        back_populates="client",
        order_by="ChecklistTemplate.sort_order",
        cascade="all, delete-orphan",
    )


class ChecklistTemplate(Base, TimestampMixin):
    """A step copied into every new payroll run for a client."""

    __tablename__ = "checklist_template"

    checklist_template_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("client.client_id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    client: Mapped[Client] = relationship(back_populates="checklist_templates")
