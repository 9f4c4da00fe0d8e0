"""Data Transfer Objects package."""

from profile_api.models.dto.absence import (
    AbsenceCreate,
    AbsenceResponse,
    AbsenceStatusUpdate,
    SweepResponse,
)
from profile_api.models.dto.auth import LoginRequest, SwitchUserRequest, TokenResponse, UserInfo
from profile_api.models.dto.directory import DirectoryEntry
from profile_api.models.dto.feedback import (
    FeedbackCreate,
    FeedbackResponse,
    PolishRequest,
    PolishResponse,
)
from profile_api.models.dto.profile import ProfileMetadata, ProfilePatch, ProfileResponse

__all__ = [
    "AbsenceCreate",
    "AbsenceResponse",
    "AbsenceStatusUpdate",
    "DirectoryEntry",
    "FeedbackCreate",
    "FeedbackResponse",
    "LoginRequest",
    "PolishRequest",
    "PolishResponse",
    "ProfileMetadata",
    "ProfilePatch",
    "ProfileResponse",
    "SweepResponse",
    "SwitchUserRequest",
    "TokenResponse",
    "UserInfo",
]
