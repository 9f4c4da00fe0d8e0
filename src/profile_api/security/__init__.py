"""Security package: authentication and field-level access rules."""

from profile_api.security.auth import (
    create_access_token,
    get_current_user,
    require_manager,
)
from profile_api.security.feedback_visibility import can_read_feedback
from profile_api.security.permission_matrix import can_edit, can_view
from profile_api.security.relationships import determine_relationship

__all__ = [
    "can_edit",
    "can_read_feedback",
    "can_view",
    "create_access_token",
    "determine_relationship",
    "get_current_user",
    "require_manager",
]
