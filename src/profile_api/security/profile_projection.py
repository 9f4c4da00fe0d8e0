"""Relationship-aware projection of a profile."""

import logging

from profile_api.models.domain.access import Relationship
from profile_api.models.dto.profile import ProfileMetadata, ProfileResponse
from profile_api.models.orm.employee_profile import EmployeeProfileORM
from profile_api.models.orm.user import UserORM
from profile_api.security.field_classifier import fields_of
from profile_api.security.permission_matrix import editable_classes, visible_classes

logger = logging.getLogger(__name__)


def build_metadata(relationship: Relationship) -> ProfileMetadata:
    """Describe what a viewer in ``relationship`` may see and edit."""
    return ProfileMetadata(
        relationship=relationship.wire_label,
        visible_classes=visible_classes(relationship),
        editable_classes=editable_classes(relationship),
    )


def project_profile(
    profile: EmployeeProfileORM,
    user: UserORM,
    relationship: Relationship,
) -> ProfileResponse:
    """Project a profile for a viewer.

    Identity attributes are always present. A classified attribute is set
    only when its class is visible to ``relationship``; redacted attributes
    stay unset so ``exclude_unset`` dumps omit them rather than emit null.

    Args:
        profile: Stored profile row
        user: Owning user row
        relationship: Viewer's relationship to the owner

    Returns:
        Projected profile
    """
    values = {
        "id": profile.id,
        "user_id": user.id,
        "email": user.email,
        "employee_id": user.employee_id,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }
    for field_class in visible_classes(relationship):
        for field in fields_of(field_class):
            values[field] = getattr(profile, field)

    logger.debug("Projected profile %s for relationship %s", user.id, relationship)
    return ProfileResponse(**values, metadata=build_metadata(relationship))


def first_name_of(profile: EmployeeProfileORM) -> str:
    """Preferred name, falling back to the legal first name."""
    return profile.preferred_name or profile.legal_first_name


def display_name_of(profile: EmployeeProfileORM) -> str:
    """Name shown next to feedback and in listings."""
    return f"{first_name_of(profile)} {profile.legal_last_name}"
