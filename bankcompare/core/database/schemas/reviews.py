"""
Schema models for service reviews.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ServiceReviewBase(BaseModel):
    """Base fields for service review schema."""

    service_id: str
    user_id: Optional[str] = Field(default=None, description="Author, None once the account is deleted")
    rating: int = Field(ge=1, le=5, description="Star rating")
    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    verified_customer: bool = Field(default=False)
    helpful_votes: int = Field(default=0, ge=0)
    is_featured: bool = Field(default=False)
    is_approved: bool = Field(default=False)


class ServiceReviewRead(ServiceReviewBase):
    """Schema for reading service reviews."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ServiceReviewCreate(ServiceReviewBase):
    """Schema for creating service reviews."""

    pass
