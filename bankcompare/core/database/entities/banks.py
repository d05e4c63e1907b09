"""
Bank entity models.

This module contains the core comparison catalog: service categories, the
financial institutions, and the individual products each bank offers.
All fee amounts are integer cents.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, json_type, new_id, utc_now

if TYPE_CHECKING:
    from .features import ServiceFeatureValue
    from .pricing import ServicePricingHistory
    from .reviews import ServiceReview


class BankType(Base, table=True):
    """Category of banking service (checking, savings, ...).

    Ids are human-readable keys chosen by the content team, not generated.

    Table: bank_type
    """

    __tablename__ = "bank_type"

    id: str = Field(primary_key=True, max_length=50)
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    sort_order: Optional[int] = Field(default=0, sa_column_kwargs={"server_default": "0"})

    def __repr__(self) -> str:
        return f"BankType(id={self.id}, name={self.name})"


class Bank(Base, table=True):
    """Financial institution.

    Table: bank
    """

    __tablename__ = "bank"
    __table_args__ = (
        sa.Index("bank_slug_idx", "slug", unique=True),
        sa.Index("bank_name_idx", "name"),
        sa.Index("bank_is_active_idx", "is_active"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    logo_url: Optional[str] = Field(default=None, sa_type=sa.Text)
    website_url: Optional[str] = Field(default=None, sa_type=sa.Text)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    headquarters_country: Optional[str] = Field(default=None, max_length=2)
    founded_year: Optional[int] = None
    is_active: bool = Field(default=True, sa_column_kwargs={"server_default": sa.true()})

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    services: List["BankService"] = Relationship(back_populates="bank", cascade_delete=True, passive_deletes=True)

    def __repr__(self) -> str:
        return f"Bank(id={self.id}, slug={self.slug})"


class BankService(Base, table=True):
    """A specific product offered by a bank.

    Slugs are unique within the owning bank only. ``rating`` and
    ``review_count`` are denormalized summaries maintained by the
    application.

    Table: bank_service
    """

    __tablename__ = "bank_service"
    __table_args__ = (
        sa.Index("bank_service_bank_id_idx", "bank_id"),
        sa.Index("bank_service_type_idx", "type_id"),
        sa.Index("bank_service_rating_idx", "rating"),
        sa.Index("bank_service_fee_idx", "monthly_fee_cents"),
        sa.Index("bank_service_is_active_idx", "is_active"),
        sa.Index("bank_service_bank_slug_idx", "bank_id", "slug", unique=True),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    bank_id: str = Field(foreign_key="bank.id", ondelete="CASCADE", sa_type=sa.Text)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    type_id: str = Field(foreign_key="bank_type.id", max_length=50)
    logo_url: Optional[str] = Field(default=None, sa_type=sa.Text)

    # Fees (cents)
    monthly_fee_cents: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    setup_fee_cents: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    minimum_balance_cents: int = Field(default=0, sa_column_kwargs={"server_default": "0"})

    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    pros: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    cons: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    features: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )

    rating: Decimal = Field(
        default=Decimal("0"), max_digits=2, decimal_places=1, sa_column_kwargs={"server_default": "0"}
    )
    review_count: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    is_featured: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    is_active: bool = Field(default=True, sa_column_kwargs={"server_default": sa.true()})

    data_last_updated: datetime = Field(default_factory=utc_now)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    bank: Optional[Bank] = Relationship(back_populates="services")
    bank_type: Optional[BankType] = Relationship()
    reviews: List["ServiceReview"] = Relationship(back_populates="service", cascade_delete=True, passive_deletes=True)
    feature_values: List["ServiceFeatureValue"] = Relationship(
        back_populates="service", cascade_delete=True, passive_deletes=True
    )
    pricing_history: List["ServicePricingHistory"] = Relationship(
        back_populates="service", cascade_delete=True, passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"BankService(id={self.id}, bank_id={self.bank_id}, slug={self.slug})"
