"""Deal model module."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Enum, ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crm.models.base import Base, TimestampMixin
from crm.models.enums import DealStatus


class Deal(Base, TimestampMixin):
    __tablename__ = "deals"
    __table_args__ = (
        Index("idx_deals_customer", "customer_id"),
        Index("idx_deals_company", "company_id"),
        Index("idx_deals_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    status: Mapped[DealStatus] = mapped_column(
        Enum(
            DealStatus,
            name="deal_status",
            values_callable=lambda members: [member.value for member in members],
        ),
        default=DealStatus.NEW,
        nullable=False,
    )
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False)
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id", ondelete="RESTRICT"), nullable=False)

    customer = relationship("Customer", back_populates="deals")
    company = relationship("Company", back_populates="deals")
