"""
Comparison entity models.

This module contains the two ways services are compared side by side:
short-lived comparison sessions (anonymous or signed in) and saved
advanced comparisons carrying computed metrics.
"""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Dict, List, Literal, Optional

import sqlalchemy as sa
from pydantic import BaseModel, model_validator
from sqlmodel import Field, Relationship

from ..base import Base, json_type, new_id, utc_now

if TYPE_CHECKING:
    from .auth import User

# Lifetime of a comparison session when no expiry is supplied
COMPARISON_SESSION_TTL = timedelta(days=7)


class ComparisonMetric(BaseModel):
    """One computed metric of an advanced comparison."""

    name: str
    value: float
    unit: str
    trend: Literal["up", "down", "stable"]
    comparison: Literal["better", "worse", "equal"]


class ComparisonSession(Base, table=True):
    """Transient set of services being compared.

    ``expires_at`` defaults to exactly ``created_at`` plus seven days.

    Table: comparison_session
    """

    __tablename__ = "comparison_session"
    __table_args__ = (
        sa.Index("comparison_session_user_idx", "user_id"),
        sa.Index("comparison_session_token_idx", "session_token"),
        sa.Index("comparison_session_expires_idx", "expires_at"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    user_id: Optional[str] = Field(default=None, foreign_key="user.id", ondelete="SET NULL", sa_type=sa.Text)
    session_token: Optional[str] = Field(default=None, max_length=255)
    service_ids: List[str] = Field(sa_type=json_type(), nullable=False)
    created_at: datetime = Field(default_factory=utc_now)
    expires_at: datetime = Field(default=None, nullable=False)

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        # Validation first builds an empty instance, with no created_at yet
        if self.expires_at is None and self.created_at is not None:
            self.expires_at = self.created_at + COMPARISON_SESSION_TTL

    @model_validator(mode="before")
    @classmethod
    def _default_expiry(cls, data: Any) -> Any:
        # ``model_validate`` fills the fields after __init__ has already run
        if isinstance(data, dict) and data.get("expires_at") is None:
            created_at = data.get("created_at") or utc_now()
            if isinstance(created_at, str):
                created_at = datetime.fromisoformat(created_at)
            data = {**data, "created_at": created_at, "expires_at": created_at + COMPARISON_SESSION_TTL}
        return data

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Whether the session has passed its expiry."""
        return (now or utc_now()) >= self.expires_at

    def __repr__(self) -> str:
        return f"ComparisonSession(id={self.id}, services={len(self.service_ids or [])}, expires_at={self.expires_at})"


class AdvancedComparison(Base, table=True):
    """Saved comparison with computed metrics, insights and recommendations.

    Table: advanced_comparison
    """

    __tablename__ = "advanced_comparison"
    __table_args__ = (
        sa.Index("advanced_comparison_user_idx", "user_id"),
        sa.Index("advanced_comparison_saved_idx", "is_saved"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", sa_type=sa.Text)
    title: Optional[str] = Field(default=None, max_length=255)
    service_ids: List[str] = Field(sa_type=json_type(), nullable=False)
    metrics: Optional[List[Dict[str, Any]]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    insights: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    recommendations: Optional[List[str]] = Field(
        default_factory=list, sa_type=json_type(), sa_column_kwargs={"server_default": "[]"}
    )
    is_saved: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    user: Optional["User"] = Relationship(back_populates="comparisons")

    def get_metrics(self) -> List[ComparisonMetric]:
        """Get metrics as typed models."""
        return [ComparisonMetric.model_validate(metric) for metric in self.metrics or []]

    def set_metrics(self, metrics: List[ComparisonMetric]) -> None:
        """Set metrics from typed models."""
        self.metrics = [metric.model_dump() for metric in metrics]

    def __repr__(self) -> str:
        return f"AdvancedComparison(id={self.id}, user_id={self.user_id}, saved={self.is_saved})"
