"""Repository layer for database operations."""

from profile_api.repositories.absence_repository import AbsenceRepository
from profile_api.repositories.base import BaseRepository
from profile_api.repositories.feedback_repository import FeedbackRepository
from profile_api.repositories.profile_repository import ProfileRepository
from profile_api.repositories.user_repository import UserRepository

__all__ = [
    "AbsenceRepository",
    "BaseRepository",
    "FeedbackRepository",
    "ProfileRepository",
    "UserRepository",
]
