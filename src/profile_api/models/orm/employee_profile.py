"""Employee profile ORM model."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class EmployeeProfileORM(Base, UUIDMixin, TimestampMixin):
    """Employee profile database model (1:1 with users)."""

    __tablename__ = "employee_profiles"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # System-managed
    legal_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    legal_last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    job_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    job_family: Mapped[str | None] = mapped_column(String(100), nullable=True)
    job_level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    employment_status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    termination_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    fte: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False, default=Decimal("1.00"))

    # Non-sensitive
    preferred_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(150), nullable=True)
    office_location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    work_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    work_location_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Sensitive
    personal_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    personal_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    home_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    emergency_contact_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    emergency_contact_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    emergency_contact_relationship: Mapped[str | None] = mapped_column(String(50), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    visa_work_permit: Mapped[str | None] = mapped_column(String(200), nullable=True)
    absence_balance_days: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    performance_rating: Mapped[str | None] = mapped_column(String(50), nullable=True)

    __table_args__ = (
        CheckConstraint("fte >= 0 AND fte <= 1", name="ck_employee_profiles_fte_range"),
        CheckConstraint(
            "termination_date IS NULL OR termination_date >= hire_date",
            name="ck_employee_profiles_termination_after_hire",
        ),
        Index("idx_employee_profiles_employment_status", "employment_status"),
        Index("idx_employee_profiles_department", "department"),
    )
