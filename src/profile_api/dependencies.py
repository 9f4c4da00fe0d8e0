"""Centralized dependency injection factories for FastAPI.

Each factory builds a request-scoped service on the request's session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.database import get_db
from profile_api.services.absence_service import AbsenceService
from profile_api.services.auth_service import AuthService
from profile_api.services.directory_service import DirectoryService
from profile_api.services.feedback_polish_service import FeedbackPolishService
from profile_api.services.feedback_service import FeedbackService
from profile_api.services.profile_service import ProfileService


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db)


def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    """Get ProfileService instance."""
    return ProfileService(db)


def get_directory_service(db: AsyncSession = Depends(get_db)) -> DirectoryService:
    """Get DirectoryService instance."""
    return DirectoryService(db)


def get_feedback_service(db: AsyncSession = Depends(get_db)) -> FeedbackService:
    """Get FeedbackService instance."""
    return FeedbackService(db)


def get_absence_service(db: AsyncSession = Depends(get_db)) -> AbsenceService:
    """Get AbsenceService instance."""
    return AbsenceService(db)


def get_feedback_polish_service() -> FeedbackPolishService:
    """Get FeedbackPolishService instance (no database session)."""
    return FeedbackPolishService.from_settings()
