"""Employee absence ORM model."""

from datetime import date
from uuid import UUID

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class EmployeeAbsenceORM(Base, UUIDMixin, TimestampMixin):
    """Absence request database model."""

    __tablename__ = "employee_absences"

    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # Requester's manager at submission time; decides who may approve
    manager_id: Mapped[UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="PENDING")
    note: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_employee_absences_date_order"),
        Index("idx_employee_absences_user_id", "user_id"),
        Index("idx_employee_absences_manager_status", "manager_id", "status"),
        Index("idx_employee_absences_status_end_date", "status", "end_date"),
    )
