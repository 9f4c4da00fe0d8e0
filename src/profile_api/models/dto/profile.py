"""Profile DTOs."""

import re
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email

from profile_api.constants.validation import PHONE_PATTERN, PROFILE_FIELD_MAX_LENGTHS
from profile_api.models.domain.access import FieldClass
from profile_api.models.domain.profile import EmploymentStatus, WorkLocationType
from profile_api.models.dto.base import ApiModel
from profile_api.utils.dates import service_today

_PHONE_RE = re.compile(PHONE_PATTERN)


class ProfileMetadata(ApiModel):
    """Describes what the viewer may see and edit."""

    relationship: str
    visible_classes: list[FieldClass]
    editable_classes: list[FieldClass]


class ProfileResponse(ApiModel):
    """Projected profile.

    Only attributes the viewer may see are set; serialise with
    ``exclude_unset=True`` so redacted attributes are absent, not null.
    """

    # Identity
    id: UUID
    user_id: UUID
    email: str
    employee_id: str

    # System-managed
    legal_first_name: str | None = None
    legal_last_name: str | None = None
    department: str | None = None
    job_code: str | None = None
    job_family: str | None = None
    job_level: str | None = None
    employment_status: EmploymentStatus | None = None
    hire_date: date | None = None
    termination_date: date | None = None
    fte: Decimal | None = None

    # Non-sensitive
    preferred_name: str | None = None
    job_title: str | None = None
    office_location: str | None = None
    work_phone: str | None = None
    work_location_type: WorkLocationType | None = None
    bio: str | None = None
    skills: str | None = None
    profile_photo_url: str | None = None

    # Sensitive
    personal_email: str | None = None
    personal_phone: str | None = None
    home_address: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    emergency_contact_relationship: str | None = None
    date_of_birth: date | None = None
    visa_work_permit: str | None = None
    absence_balance_days: Decimal | None = None
    salary: Decimal | None = None
    performance_rating: str | None = None

    created_at: datetime
    updated_at: datetime
    metadata: ProfileMetadata


def _max_len(field: str) -> int:
    return PROFILE_FIELD_MAX_LENGTHS[field]


class ProfilePatch(BaseModel):
    """Validation rules for editable profile attributes.

    Internal model: keys are snake_case attribute names that already passed
    classification and permission checks.
    """

    model_config = ConfigDict(extra="forbid")

    # Non-sensitive
    preferred_name: str | None = Field(default=None, max_length=_max_len("preferred_name"))
    job_title: str | None = Field(default=None, max_length=_max_len("job_title"))
    office_location: str | None = Field(default=None, max_length=_max_len("office_location"))
    work_phone: str | None = Field(default=None, max_length=_max_len("work_phone"))
    work_location_type: WorkLocationType | None = None
    bio: str | None = Field(default=None, max_length=_max_len("bio"))
    skills: str | None = Field(default=None, max_length=_max_len("skills"))
    profile_photo_url: str | None = Field(default=None, max_length=_max_len("profile_photo_url"))

    # Sensitive
    personal_email: str | None = Field(default=None, max_length=_max_len("personal_email"))
    personal_phone: str | None = Field(default=None, max_length=_max_len("personal_phone"))
    home_address: str | None = Field(default=None, max_length=_max_len("home_address"))
    emergency_contact_name: str | None = Field(
        default=None, max_length=_max_len("emergency_contact_name")
    )
    emergency_contact_phone: str | None = Field(
        default=None, max_length=_max_len("emergency_contact_phone")
    )
    emergency_contact_relationship: str | None = Field(
        default=None, max_length=_max_len("emergency_contact_relationship")
    )
    date_of_birth: date | None = None
    visa_work_permit: str | None = Field(default=None, max_length=_max_len("visa_work_permit"))
    absence_balance_days: Decimal | None = Field(
        default=None, ge=0, max_digits=5, decimal_places=2
    )
    salary: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    performance_rating: str | None = Field(default=None, max_length=_max_len("performance_rating"))

    @field_validator("work_phone", "personal_phone", "emergency_contact_phone")
    @classmethod
    def validate_phone(cls, value: str | None) -> str | None:
        """Accept empty string or a permissive international phone number."""
        if value is None or value == "":
            return value
        if not _PHONE_RE.match(value):
            raise ValueError("Invalid phone format")
        return value

    @field_validator("personal_email")
    @classmethod
    def validate_personal_email(cls, value: str | None) -> str | None:
        """Accept empty string or an RFC 5322 address."""
        if value is None or value == "":
            return value
        try:
            validate_email(value)
        except Exception as e:
            raise ValueError("Invalid email format") from e
        return value

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, value: date | None) -> date | None:
        """Date of birth cannot lie in the future."""
        if value is not None and value > service_today():
            raise ValueError("Date of birth cannot be in the future")
        return value
