"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates all tables for SeatSpot:
users, establishments, reviews, edit_requests, images, feedback.

Enum columns hold the Python enum member *names* (SQLAlchemy's default for
``Enum`` types), e.g. ``in_progress`` for feedback status "in-progress".
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(10), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- establishments ---
    op.create_table(
        "establishments",
        sa.Column("establishment_id", sa.String(36), primary_key=True),
        sa.Column("external_id", sa.String(100), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(20), nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("external_rating", sa.Float, nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_establishments_external_id", "establishments", ["external_id"])

    # --- reviews ---
    op.create_table(
        "reviews",
        sa.Column("review_id", sa.String(36), primary_key=True),
        sa.Column("establishment_id", sa.String(36), sa.ForeignKey("establishments.establishment_id"), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("seat_type", sa.String(20), nullable=False),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("comfort_rating", sa.String(20), nullable=False),
        sa.Column("has_power_outlet", sa.Boolean, nullable=False, server_default="0"),
        sa.Column("noise_level", sa.String(20), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("upvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_visible", sa.Boolean, nullable=False, server_default="1"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_reviews_establishment_id", "reviews", ["establishment_id"])
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])

    # --- edit_requests ---
    op.create_table(
        "edit_requests",
        sa.Column("request_id", sa.String(36), primary_key=True),
        sa.Column("review_id", sa.String(36), sa.ForeignKey("reviews.review_id"), nullable=False),
        sa.Column("requester_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("request_type", sa.String(10), nullable=False),
        sa.Column("seat_type", sa.String(20), nullable=True),
        sa.Column("capacity", sa.Integer, nullable=True),
        sa.Column("comfort_rating", sa.String(20), nullable=True),
        sa.Column("has_power_outlet", sa.Boolean, nullable=True),
        sa.Column("noise_level", sa.String(20), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("cleared_fields", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("admin_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_edit_requests_review_id", "edit_requests", ["review_id"])
    op.create_index("ix_edit_requests_status", "edit_requests", ["status"])

    # --- images ---
    op.create_table(
        "images",
        sa.Column("image_id", sa.String(36), primary_key=True),
        sa.Column("review_id", sa.String(36), sa.ForeignKey("reviews.review_id"), nullable=False),
        sa.Column("url", sa.String(1000), nullable=False),
        sa.Column("storage_key", sa.String(255), nullable=False),
        sa.Column("width", sa.Integer, nullable=True),
        sa.Column("height", sa.Integer, nullable=True),
        sa.Column("format", sa.String(20), nullable=True),
        sa.Column("moderation_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("moderated_by", sa.String(36), sa.ForeignKey("users.user_id"), nullable=True),
        sa.Column("moderated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_visible", sa.Boolean, nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_images_review_id", "images", ["review_id"])

    # --- feedback ---
    op.create_table(
        "feedback",
        sa.Column("feedback_id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("category", sa.String(20), nullable=False, server_default="general"),
        sa.Column("upvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("feedback")
    op.drop_table("images")
    op.drop_table("edit_requests")
    op.drop_table("reviews")
    op.drop_table("establishments")
    op.drop_table("users")
