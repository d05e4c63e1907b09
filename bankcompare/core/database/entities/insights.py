"""
Market insight entity models.

Editorial articles about the banking market. Premium articles are only
shown to paid plans; drafts stay hidden until published.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

import sqlalchemy as sa
from sqlmodel import Field

from ..base import Base, enum_type, json_type, new_id, utc_now


class InsightCategory(str, Enum):
    """Editorial category of a market insight."""

    MARKET_TRENDS = "market-trends"
    REGULATORY = "regulatory"
    PRODUCT_ANALYSIS = "product-analysis"


class MarketInsight(Base, table=True):
    """Editorial article.

    Table: market_insight
    """

    __tablename__ = "market_insight"
    __table_args__ = (
        sa.Index("market_insight_slug_idx", "slug", unique=True),
        sa.Index("market_insight_category_idx", "category"),
        sa.Index("market_insight_premium_idx", "is_premium"),
        sa.Index("market_insight_published_idx", "is_published", "published_at"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    title: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    content: str = Field(sa_type=sa.Text)
    excerpt: Optional[str] = Field(default=None, sa_type=sa.Text)
    category: InsightCategory = Field(sa_type=enum_type(InsightCategory, "market_insight_category_check"))
    is_premium: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    author: Optional[str] = Field(default=None, max_length=100)
    featured_image_url: Optional[str] = Field(default=None, sa_type=sa.Text)
    tags: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    view_count: int = Field(default=0, sa_column_kwargs={"server_default": "0"})

    # Publishing
    is_published: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    published_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"MarketInsight(id={self.id}, slug={self.slug}, published={self.is_published})"
