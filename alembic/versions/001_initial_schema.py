"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("employee_id", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), server_default="EMPLOYEE", nullable=False),
        sa.Column("manager_id", postgresql.UUID(as_uuid=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("employee_id"),
        sa.UniqueConstraint("email"),
        sa.ForeignKeyConstraint(["manager_id"], ["users.id"], ondelete="RESTRICT"),
        sa.CheckConstraint("manager_id IS NULL OR manager_id <> id", name="ck_users_not_own_manager"),
    )
    op.create_index("idx_users_manager_id", "users", ["manager_id"])

    # Create employee_profiles table
    op.create_table(
        "employee_profiles",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        # System-managed
        sa.Column("legal_first_name", sa.String(100), nullable=False),
        sa.Column("legal_last_name", sa.String(100), nullable=False),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("job_code", sa.String(50), nullable=True),
        sa.Column("job_family", sa.String(100), nullable=True),
        sa.Column("job_level", sa.String(50), nullable=True),
        sa.Column("employment_status", sa.String(20), server_default="ACTIVE", nullable=False),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("termination_date", sa.Date(), nullable=True),
        sa.Column("fte", sa.Numeric(3, 2), server_default="1.00", nullable=False),
        # Non-sensitive
        sa.Column("preferred_name", sa.String(100), nullable=True),
        sa.Column("job_title", sa.String(150), nullable=True),
        sa.Column("office_location", sa.String(200), nullable=True),
        sa.Column("work_phone", sa.String(20), nullable=True),
        sa.Column("work_location_type", sa.String(20), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("skills", sa.Text(), nullable=True),
        sa.Column("profile_photo_url", sa.String(500), nullable=True),
        # Sensitive
        sa.Column("personal_email", sa.String(255), nullable=True),
        sa.Column("personal_phone", sa.String(20), nullable=True),
        sa.Column("home_address", sa.Text(), nullable=True),
        sa.Column("emergency_contact_name", sa.String(200), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(20), nullable=True),
        sa.Column("emergency_contact_relationship", sa.String(50), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("visa_work_permit", sa.String(200), nullable=True),
        sa.Column("absence_balance_days", sa.Numeric(5, 2), nullable=True),
        sa.Column("salary", sa.Numeric(12, 2), nullable=True),
        sa.Column("performance_rating", sa.String(50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("fte >= 0 AND fte <= 1", name="ck_employee_profiles_fte_range"),
        sa.CheckConstraint(
            "termination_date IS NULL OR termination_date >= hire_date",
            name="ck_employee_profiles_termination_after_hire",
        ),
    )
    op.create_index(
        "idx_employee_profiles_employment_status", "employee_profiles", ["employment_status"]
    )
    op.create_index("idx_employee_profiles_department", "employee_profiles", ["department"])

    # Create feedback table
    op.create_table(
        "feedback",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("recipient_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("ai_polished", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("author_id <> recipient_id", name="ck_feedback_not_self"),
    )
    op.create_index("idx_feedback_recipient_created", "feedback", ["recipient_id", "created_at"])
    op.create_index("idx_feedback_author_created", "feedback", ["author_id", "created_at"])

    # Create employee_absences table
    op.create_table(
        "employee_absences",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("manager_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("status", sa.String(32), server_default="PENDING", nullable=False),
        sa.Column("note", sa.String(500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["manager_id"], ["users.id"], ondelete="SET NULL"),
        sa.CheckConstraint("end_date >= start_date", name="ck_employee_absences_date_order"),
    )
    op.create_index("idx_employee_absences_user_id", "employee_absences", ["user_id"])
    op.create_index(
        "idx_employee_absences_manager_status", "employee_absences", ["manager_id", "status"]
    )
    op.create_index(
        "idx_employee_absences_status_end_date", "employee_absences", ["status", "end_date"]
    )


def downgrade() -> None:
    op.drop_table("employee_absences")
    op.drop_table("feedback")
    op.drop_table("employee_profiles")
    op.drop_table("users")
