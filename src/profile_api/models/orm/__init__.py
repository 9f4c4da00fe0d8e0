"""SQLAlchemy ORM models package."""

from profile_api.models.orm.base import Base
from profile_api.models.orm.employee_absence import EmployeeAbsenceORM
from profile_api.models.orm.employee_profile import EmployeeProfileORM
from profile_api.models.orm.feedback import FeedbackORM
from profile_api.models.orm.user import UserORM

__all__ = [
    "Base",
    "EmployeeAbsenceORM",
    "EmployeeProfileORM",
    "FeedbackORM",
    "UserORM",
]
