"""
Pricing history entity models.

Historical fee changes of bank services. A row with no ``effective_to``
is the price currently in force.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, new_id, utc_now

if TYPE_CHECKING:
    from .banks import BankService


class ServicePricingHistory(Base, table=True):
    """Fee snapshot of a service over an effective date range.

    Table: service_pricing_history
    """

    __tablename__ = "service_pricing_history"
    __table_args__ = (
        sa.Index("service_pricing_history_service_idx", "service_id"),
        sa.Index("service_pricing_history_effective_idx", "effective_from"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    service_id: str = Field(foreign_key="bank_service.id", ondelete="CASCADE", sa_type=sa.Text)

    # Fees (cents)
    monthly_fee_cents: Optional[int] = None
    setup_fee_cents: Optional[int] = None
    minimum_balance_cents: Optional[int] = None

    effective_from: datetime = Field(default_factory=utc_now)
    effective_to: Optional[datetime] = None
    change_reason: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utc_now)

    service: Optional["BankService"] = Relationship(back_populates="pricing_history")

    def is_current(self, at: Optional[datetime] = None) -> bool:
        """Whether this price was in force at ``at`` (default: now)."""
        moment = at or utc_now()
        return self.effective_from <= moment and (self.effective_to is None or moment < self.effective_to)

    def __repr__(self) -> str:
        return f"ServicePricingHistory(id={self.id}, service_id={self.service_id}, from={self.effective_from})"
