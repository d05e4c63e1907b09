"""
Schema models for market insights.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..entities.insights import InsightCategory


class MarketInsightBase(BaseModel):
    """Base fields for market insight schema."""

    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    content: str
    excerpt: Optional[str] = None
    category: InsightCategory
    is_premium: bool = Field(default=False, description="Only shown to paid plans")
    author: Optional[str] = Field(default=None, max_length=100)
    featured_image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    view_count: int = Field(default=0, ge=0)
    is_published: bool = Field(default=False)
    published_at: Optional[datetime] = None


class MarketInsightRead(MarketInsightBase):
    """Schema for reading market insights."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MarketInsightCreate(MarketInsightBase):
    """Schema for creating market insights."""

    pass
