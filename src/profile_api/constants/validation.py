"""Centralized validation constants for the profile API.

Single source of truth for input limits and patterns used across DTOs,
services and routers.
"""

from types import MappingProxyType
from typing import Final

# =============================================================================
# Profile Field Constants
# =============================================================================

PROFILE_FIELD_MAX_LENGTHS: Final = MappingProxyType(
    {
        # Non-sensitive
        "preferred_name": 100,
        "job_title": 150,
        "office_location": 200,
        "work_phone": 20,
        "bio": 5000,
        "skills": 1000,
        "profile_photo_url": 500,
        # Sensitive
        "personal_email": 255,
        "personal_phone": 20,
        "home_address": 500,
        "emergency_contact_name": 200,
        "emergency_contact_phone": 20,
        "emergency_contact_relationship": 50,
        "visa_work_permit": 200,
        "performance_rating": 50,
    }
)

# Optional country code, optional area code, then digit groups. Empty clears.
PHONE_PATTERN: Final[str] = (
    r"^\+?[0-9]{1,4}?[-.\s]?\(?[0-9]{1,3}?\)?[-.\s]?[0-9]{1,4}[-.\s]?[0-9]{1,4}[-.\s]?[0-9]{1,9}$|^$"
)

# =============================================================================
# Feedback Constants
# =============================================================================

POLISH_MIN_CHARS: Final[int] = 10
POLISH_MAX_CHARS: Final[int] = 1000

# =============================================================================
# Absence Constants
# =============================================================================

ABSENCE_NOTE_MAX_LENGTH: Final[int] = 500

# =============================================================================
# Directory Filter Constants
# =============================================================================

MAX_SEARCH_LENGTH: Final[int] = 200
MAX_DEPARTMENT_LENGTH: Final[int] = 100

# =============================================================================
# Password Constants
# =============================================================================

MIN_PASSWORD_LENGTH: Final[int] = 8
MAX_PASSWORD_LENGTH: Final[int] = 128
