"""
Feature comparison entity models.

This module contains the catalog of comparable feature dimensions and each
service's value for them. Values are stored as text together with their
type; numeric and currency values are mirrored into ``numeric_value`` so
services can be sorted on a feature.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING, Optional

import sqlalchemy as sa
from sqlmodel import Field, Relationship

from ..base import Base, enum_type, new_id

if TYPE_CHECKING:
    from .banks import BankService


class FeatureValueType(str, Enum):
    """How a feature value should be interpreted."""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    CURRENCY = "currency"


class ServiceFeature(Base, table=True):
    """A comparable feature dimension (e.g. "ATM fee refunds").

    Table: service_feature
    """

    __tablename__ = "service_feature"
    __table_args__ = (
        sa.Index("service_feature_name_idx", "name", unique=True),
        sa.Index("service_feature_category_idx", "category"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    name: str = Field(max_length=100)
    category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, sa_type=sa.Text)
    icon: Optional[str] = Field(default=None, max_length=100)
    is_premium_feature: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    sort_order: int = Field(default=0, sa_column_kwargs={"server_default": "0"})

    def __repr__(self) -> str:
        return f"ServiceFeature(id={self.id}, name={self.name})"


class ServiceFeatureValue(Base, table=True):
    """A service's value for one feature; at most one per (service, feature).

    Table: service_feature_value
    """

    __tablename__ = "service_feature_value"
    __table_args__ = (
        sa.Index("service_feature_value_service_feature_idx", "service_id", "feature_id", unique=True),
        sa.Index("service_feature_value_service_idx", "service_id"),
        sa.Index("service_feature_value_feature_idx", "feature_id"),
        sa.Index("service_feature_value_numeric_idx", "numeric_value"),
    )

    id: str = Field(default_factory=new_id, primary_key=True, sa_type=sa.Text)
    service_id: str = Field(foreign_key="bank_service.id", ondelete="CASCADE", sa_type=sa.Text)
    feature_id: str = Field(foreign_key="service_feature.id", ondelete="CASCADE", sa_type=sa.Text)
    value: Optional[str] = Field(default=None, sa_type=sa.Text)
    value_type: FeatureValueType = Field(
        default=FeatureValueType.BOOLEAN,
        sa_type=enum_type(FeatureValueType, "service_feature_value_type_check"),
        sa_column_kwargs={"server_default": FeatureValueType.BOOLEAN.value},
    )
    numeric_value: Optional[Decimal] = Field(default=None, max_digits=15, decimal_places=2)
    is_available: bool = Field(default=True, sa_column_kwargs={"server_default": sa.true()})
    notes: Optional[str] = Field(default=None, sa_type=sa.Text)

    service: Optional["BankService"] = Relationship(back_populates="feature_values")
    feature: Optional[ServiceFeature] = Relationship()

    def typed_value(self) -> bool | str | Decimal | None:
        """Interpret ``value`` according to ``value_type``.

        Returns:
            ``bool`` for boolean features, ``Decimal`` for number and currency
            features (preferring ``numeric_value``), the raw text otherwise or
            when a number or currency value does not parse.
        """
        if self.value_type == FeatureValueType.BOOLEAN:
            if self.value is None:
                return self.is_available
            return self.value.strip().lower() in ("true", "1", "yes")
        if self.value_type in (FeatureValueType.NUMBER, FeatureValueType.CURRENCY):
            if self.numeric_value is not None:
                return Decimal(self.numeric_value)
            if self.value is None:
                return None
            try:
                return Decimal(self.value)
            except InvalidOperation:
                return self.value
        return self.value

    def __repr__(self) -> str:
        return f"ServiceFeatureValue(service_id={self.service_id}, feature_id={self.feature_id}, value={self.value})"
