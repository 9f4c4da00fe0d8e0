"""Domain models package."""

from profile_api.models.domain.absence import AbsenceAction, AbsenceStatus, AbsenceType
from profile_api.models.domain.access import FieldClass, Relationship
from profile_api.models.domain.profile import EmploymentStatus, WorkLocationType
from profile_api.models.domain.user import AuthenticatedUser, UserRole

__all__ = [
    "AbsenceAction",
    "AbsenceStatus",
    "AbsenceType",
    "AuthenticatedUser",
    "EmploymentStatus",
    "FieldClass",
    "Relationship",
    "UserRole",
    "WorkLocationType",
]
