"""Initial schema for the bank comparison platform

Revision ID: 20261017_000000
Revises: None
Create Date: 2026-10-17 00:00:00.000000

Creates every table of the platform:
- Auth tables (user, session, account, verification)
- Subscriptions and the premium feature catalog
- Bank catalog (bank types, banks, bank services, features and feature values)
- User content (reviews, comparison sessions, advanced comparisons)
- Editorial insights, activity events and pricing history

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261017_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enumerated values are frozen here so later model changes need their own revision
SUBSCRIPTION_TYPES = ("free", "premium", "pro")
SUBSCRIPTION_STATUSES = ("active", "inactive", "trial", "cancelled")
REQUIRED_PLANS = ("premium", "pro")
FEATURE_VALUE_TYPES = ("boolean", "string", "number", "currency")
INSIGHT_CATEGORIES = ("market-trends", "regulatory", "product-analysis")


def _json() -> sa.types.TypeEngine:
    return sa.JSON().with_variant(JSONB(), "postgresql")


def _check_enum(values: Sequence[str], name: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def upgrade() -> None:
    """Create all tables."""

    # Create user table
    op.create_table(
        "user",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("email_verified", sa.Boolean(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="user_email_unique"),
    )

    # Create session table
    op.create_table(
        "session",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("token", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("ip_address", sa.Text(), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("token", name="session_token_unique"),
    )

    # Create account table
    op.create_table(
        "account",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("account_id", sa.Text(), nullable=False),
        sa.Column("provider_id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("access_token", sa.Text(), nullable=True),
        sa.Column("refresh_token", sa.Text(), nullable=True),
        sa.Column("id_token", sa.Text(), nullable=True),
        sa.Column("access_token_expires_at", sa.DateTime(), nullable=True),
        sa.Column("refresh_token_expires_at", sa.DateTime(), nullable=True),
        sa.Column("scope", sa.Text(), nullable=True),
        sa.Column("password", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
    )

    # Create verification table
    op.create_table(
        "verification",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("identifier", sa.Text(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # Create user_subscription table
    op.create_table(
        "user_subscription",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column(
            "subscription_type",
            _check_enum(SUBSCRIPTION_TYPES, "user_subscription_type_check"),
            nullable=False,
            server_default="free",
        ),
        sa.Column(
            "subscription_status",
            _check_enum(SUBSCRIPTION_STATUSES, "user_subscription_status_check"),
            nullable=False,
            server_default="inactive",
        ),
        sa.Column("trial_ends_at", sa.DateTime(), nullable=True),
        sa.Column("subscription_starts_at", sa.DateTime(), nullable=True),
        sa.Column("subscription_ends_at", sa.DateTime(), nullable=True),
        sa.Column("stripe_customer_id", sa.Text(), nullable=True),
        sa.Column("stripe_subscription_id", sa.Text(), nullable=True),
        sa.Column("features", _json(), nullable=True, server_default="[]"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.Index("user_subscription_user_id_idx", "user_id"),
        sa.Index("user_subscription_type_idx", "subscription_type"),
        sa.Index("user_subscription_stripe_customer_idx", "stripe_customer_id"),
    )

    # Create premium_feature table
    op.create_table(
        "premium_feature",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "required_plan",
            _check_enum(REQUIRED_PLANS, "premium_feature_required_plan_check"),
            nullable=False,
        ),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("premium_feature_name_idx", "name", unique=True),
        sa.Index("premium_feature_required_plan_idx", "required_plan"),
    )

    # Create bank_type table
    op.create_table(
        "bank_type",
        sa.Column("id", sa.String(50), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=True, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Create bank table
    op.create_table(
        "bank",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column("website_url", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("headquarters_country", sa.String(2), nullable=True),
        sa.Column("founded_year", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("bank_slug_idx", "slug", unique=True),
        sa.Index("bank_name_idx", "name"),
        sa.Index("bank_is_active_idx", "is_active"),
    )

    # Create bank_service table
    op.create_table(
        "bank_service",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("bank_id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("type_id", sa.String(50), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column("monthly_fee_cents", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("setup_fee_cents", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("minimum_balance_cents", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("pros", _json(), nullable=True, server_default="[]"),
        sa.Column("cons", _json(), nullable=True, server_default="[]"),
        sa.Column("features", _json(), nullable=True, server_default="[]"),
        sa.Column("rating", sa.Numeric(2, 1), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("data_last_updated", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["bank_id"], ["bank.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["type_id"], ["bank_type.id"]),
        sa.Index("bank_service_bank_id_idx", "bank_id"),
        sa.Index("bank_service_type_idx", "type_id"),
        sa.Index("bank_service_rating_idx", "rating"),
        sa.Index("bank_service_fee_idx", "monthly_fee_cents"),
        sa.Index("bank_service_is_active_idx", "is_active"),
        sa.Index("bank_service_bank_slug_idx", "bank_id", "slug", unique=True),
    )

    # Create service_feature table
    op.create_table(
        "service_feature",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("is_premium_feature", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("service_feature_name_idx", "name", unique=True),
        sa.Index("service_feature_category_idx", "category"),
    )

    # Create service_feature_value table
    op.create_table(
        "service_feature_value",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("service_id", sa.Text(), nullable=False),
        sa.Column("feature_id", sa.Text(), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.Column(
            "value_type",
            _check_enum(FEATURE_VALUE_TYPES, "service_feature_value_type_check"),
            nullable=False,
            server_default="boolean",
        ),
        sa.Column("numeric_value", sa.Numeric(15, 2), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["service_id"], ["bank_service.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["feature_id"], ["service_feature.id"], ondelete="CASCADE"),
        sa.Index("service_feature_value_service_feature_idx", "service_id", "feature_id", unique=True),
        sa.Index("service_feature_value_service_idx", "service_id"),
        sa.Index("service_feature_value_feature_idx", "feature_id"),
        sa.Index("service_feature_value_numeric_idx", "numeric_value"),
    )

    # Create service_review table
    op.create_table(
        "service_review",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("service_id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("pros", _json(), nullable=True, server_default="[]"),
        sa.Column("cons", _json(), nullable=True, server_default="[]"),
        sa.Column("verified_customer", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("helpful_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["service_id"], ["bank_service.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="SET NULL"),
        sa.Index("service_review_service_idx", "service_id"),
        sa.Index("service_review_user_idx", "user_id"),
        sa.Index("service_review_rating_idx", "rating"),
        sa.Index("service_review_approved_idx", "is_approved"),
        sa.Index("service_review_created_idx", "created_at"),
    )

    # Create comparison_session table
    op.create_table(
        "comparison_session",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=True),
        sa.Column("session_token", sa.String(255), nullable=True),
        sa.Column("service_ids", _json(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="SET NULL"),
        sa.Index("comparison_session_user_idx", "user_id"),
        sa.Index("comparison_session_token_idx", "session_token"),
        sa.Index("comparison_session_expires_idx", "expires_at"),
    )

    # Create advanced_comparison table
    op.create_table(
        "advanced_comparison",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("service_ids", _json(), nullable=False),
        sa.Column("metrics", _json(), nullable=True, server_default="[]"),
        sa.Column("insights", _json(), nullable=True, server_default="[]"),
        sa.Column("recommendations", _json(), nullable=True, server_default="[]"),
        sa.Column("is_saved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.Index("advanced_comparison_user_idx", "user_id"),
        sa.Index("advanced_comparison_saved_idx", "is_saved"),
    )

    # Create market_insight table
    op.create_table(
        "market_insight",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("category", _check_enum(INSIGHT_CATEGORIES, "market_insight_category_check"), nullable=False),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("author", sa.String(100), nullable=True),
        sa.Column("featured_image_url", sa.Text(), nullable=True),
        sa.Column("tags", _json(), nullable=True, server_default="[]"),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("market_insight_slug_idx", "slug", unique=True),
        sa.Index("market_insight_category_idx", "category"),
        sa.Index("market_insight_premium_idx", "is_premium"),
        sa.Index("market_insight_published_idx", "is_published", "published_at"),
    )

    # Create user_activity table
    op.create_table(
        "user_activity",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=True),
        sa.Column("session_token", sa.String(255), nullable=True),
        sa.Column("activity_type", sa.String(50), nullable=False),
        sa.Column("resource_type", sa.String(50), nullable=True),
        sa.Column("resource_id", sa.Text(), nullable=True),
        sa.Column("metadata", _json(), nullable=True, server_default="{}"),
        sa.Column("ip_address", sa.Text(), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"], ondelete="CASCADE"),
        sa.Index("user_activity_user_idx", "user_id"),
        sa.Index("user_activity_type_idx", "activity_type"),
        sa.Index("user_activity_created_idx", "created_at"),
    )

    # Create service_pricing_history table
    op.create_table(
        "service_pricing_history",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("service_id", sa.Text(), nullable=False),
        sa.Column("monthly_fee_cents", sa.Integer(), nullable=True),
        sa.Column("setup_fee_cents", sa.Integer(), nullable=True),
        sa.Column("minimum_balance_cents", sa.Integer(), nullable=True),
        sa.Column("effective_from", sa.DateTime(), nullable=False),
        sa.Column("effective_to", sa.DateTime(), nullable=True),
        sa.Column("change_reason", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["service_id"], ["bank_service.id"], ondelete="CASCADE"),
        sa.Index("service_pricing_history_service_idx", "service_id"),
        sa.Index("service_pricing_history_effective_idx", "effective_from"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("service_pricing_history")
    op.drop_table("user_activity")
    op.drop_table("market_insight")
    op.drop_table("advanced_comparison")
    op.drop_table("comparison_session")
    op.drop_table("service_review")
    op.drop_table("service_feature_value")
    op.drop_table("service_feature")
    op.drop_table("bank_service")
    op.drop_table("bank")
    op.drop_table("bank_type")
    op.drop_table("premium_feature")
    op.drop_table("user_subscription")
    op.drop_table("verification")
    op.drop_table("account")
    op.drop_table("session")
    op.drop_table("user")
