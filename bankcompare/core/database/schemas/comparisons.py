"""
Schema models for advanced comparisons.

``metrics`` elements follow ``ComparisonMetric``; dumping the create schema
turns them into the plain JSON objects the entity stores.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..entities.comparisons import ComparisonMetric


class AdvancedComparisonBase(BaseModel):
    """Base fields for advanced comparison schema."""

    user_id: str
    title: Optional[str] = Field(default=None, max_length=255)
    service_ids: List[str] = Field(min_length=1, description="Compared bank service ids")
    metrics: List[ComparisonMetric] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    is_saved: bool = Field(default=False)


class AdvancedComparisonRead(AdvancedComparisonBase):
    """Schema for reading advanced comparisons."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AdvancedComparisonCreate(AdvancedComparisonBase):
    """Schema for creating advanced comparisons."""

    pass
