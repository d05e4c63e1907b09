"""
Schema models for banks and bank services.

Fee amounts are integer cents and never negative.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class BankBase(BaseModel):
    """Base fields for bank schema."""

    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255, description="URL key, unique across banks")
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    description: Optional[str] = None
    headquarters_country: Optional[str] = Field(default=None, max_length=2, description="ISO 3166-1 alpha-2 code")
    founded_year: Optional[int] = None
    is_active: bool = Field(default=True)


class BankRead(BankBase):
    """Schema for reading banks."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BankCreate(BankBase):
    """Schema for creating banks."""

    pass


class BankServiceBase(BaseModel):
    """Base fields for bank service schema."""

    bank_id: str
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255, description="URL key, unique within the bank")
    type_id: str = Field(min_length=1, max_length=50)
    logo_url: Optional[str] = None

    monthly_fee_cents: int = Field(default=0, ge=0)
    setup_fee_cents: int = Field(default=0, ge=0)
    minimum_balance_cents: int = Field(default=0, ge=0)

    description: Optional[str] = None
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)

    rating: Decimal = Field(default=Decimal("0"), ge=0, max_digits=2, decimal_places=1)
    review_count: int = Field(default=0, ge=0)
    is_featured: bool = Field(default=False)
    is_active: bool = Field(default=True)


class BankServiceRead(BankServiceBase):
    """Schema for reading bank services."""

    id: str
    data_last_updated: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BankServiceCreate(BankServiceBase):
    """Schema for creating bank services."""

    pass
