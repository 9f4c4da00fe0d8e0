"""Service layer for business logic."""

from profile_api.services.absence_service import AbsenceService
from profile_api.services.auth_service import AuthService
from profile_api.services.directory_service import DirectoryService
from profile_api.services.feedback_polish_service import FeedbackPolishService
from profile_api.services.feedback_service import FeedbackService
from profile_api.services.profile_service import ProfileService
from profile_api.services.relationship_resolver import RelationshipResolver

__all__ = [
    "AbsenceService",
    "AuthService",
    "DirectoryService",
    "FeedbackPolishService",
    "FeedbackService",
    "ProfileService",
    "RelationshipResolver",
]
