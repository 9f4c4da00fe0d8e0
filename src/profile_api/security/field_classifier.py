"""Static classification of profile attributes.

Every persisted profile attribute belongs to exactly one class. The table
is compiled in and does not vary per user or at runtime.
"""

from types import MappingProxyType
from typing import Final

from profile_api.models.domain.access import FieldClass

SYSTEM_MANAGED_FIELDS: Final[tuple[str, ...]] = (
    "legal_first_name",
    "legal_last_name",
    "department",
    "job_code",
    "job_family",
    "job_level",
    "employment_status",
    "hire_date",
    "termination_date",
    "fte",
)

NON_SENSITIVE_FIELDS: Final[tuple[str, ...]] = (
    "preferred_name",
    "job_title",
    "office_location",
    "work_phone",
    "work_location_type",
    "bio",
    "skills",
    "profile_photo_url",
)

SENSITIVE_FIELDS: Final[tuple[str, ...]] = (
    "personal_email",
    "personal_phone",
    "home_address",
    "emergency_contact_name",
    "emergency_contact_phone",
    "emergency_contact_relationship",
    "date_of_birth",
    "visa_work_permit",
    "absence_balance_days",
    "salary",
    "performance_rating",
)

# Emitted to every viewer regardless of relationship
IDENTITY_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "user_id",
    "email",
    "employee_id",
    "created_at",
    "updated_at",
)

_FIELDS_BY_CLASS: Final = MappingProxyType(
    {
        FieldClass.SYSTEM_MANAGED: SYSTEM_MANAGED_FIELDS,
        FieldClass.NON_SENSITIVE: NON_SENSITIVE_FIELDS,
        FieldClass.SENSITIVE: SENSITIVE_FIELDS,
    }
)

FIELD_CLASSES: Final = MappingProxyType(
    {field: field_class for field_class, fields in _FIELDS_BY_CLASS.items() for field in fields}
)

CLASSIFIED_FIELDS: Final[tuple[str, ...]] = (
    SYSTEM_MANAGED_FIELDS + NON_SENSITIVE_FIELDS + SENSITIVE_FIELDS
)


def classify(field: str) -> FieldClass:
    """Get the class of a profile attribute.

    Args:
        field: Attribute name (snake_case)

    Returns:
        The attribute's FieldClass

    Raises:
        KeyError: If the attribute is not a classified profile field
    """
    return FIELD_CLASSES[field]


def fields_of(field_class: FieldClass) -> tuple[str, ...]:
    """Get every attribute in a class, in declaration order."""
    return _FIELDS_BY_CLASS[field_class]


def is_classified(field: str) -> bool:
    """Check whether an attribute name is a classified profile field."""
    return field in FIELD_CLASSES
