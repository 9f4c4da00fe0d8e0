"""Relationship x field-class permission matrix.

A lookup table, not virtual dispatch. Invariants:
- edit implies view in every cell
- SYSTEM_MANAGED is never editable through this service
- only SELF may edit SENSITIVE
"""

import logging
from types import MappingProxyType
from typing import Final, NamedTuple

from profile_api.models.domain.access import FieldClass, Relationship

logger = logging.getLogger(__name__)


class FieldAccess(NamedTuple):
    """Permissions for one matrix cell."""

    can_view: bool
    can_edit: bool


_VIEW = FieldAccess(can_view=True, can_edit=False)
_EDIT = FieldAccess(can_view=True, can_edit=True)
_NONE = FieldAccess(can_view=False, can_edit=False)

PERMISSION_MATRIX: Final = MappingProxyType(
    {
        (Relationship.SELF, FieldClass.SYSTEM_MANAGED): _VIEW,
        (Relationship.SELF, FieldClass.NON_SENSITIVE): _EDIT,
        (Relationship.SELF, FieldClass.SENSITIVE): _EDIT,
        (Relationship.MANAGER, FieldClass.SYSTEM_MANAGED): _VIEW,
        (Relationship.MANAGER, FieldClass.NON_SENSITIVE): _EDIT,
        (Relationship.MANAGER, FieldClass.SENSITIVE): _VIEW,
        (Relationship.COWORKER, FieldClass.SYSTEM_MANAGED): _VIEW,
        (Relationship.COWORKER, FieldClass.NON_SENSITIVE): _VIEW,
        (Relationship.COWORKER, FieldClass.SENSITIVE): _NONE,
    }
)


def access_for(relationship: Relationship, field_class: FieldClass) -> FieldAccess:
    """Look up the matrix cell for a relationship and field class."""
    return PERMISSION_MATRIX[(relationship, field_class)]


def can_view(relationship: Relationship, field_class: FieldClass) -> bool:
    """Check whether a viewer in ``relationship`` may see ``field_class``."""
    result = access_for(relationship, field_class).can_view
    logger.debug("can_view(%s, %s) = %s", relationship, field_class, result)
    return result


def can_edit(relationship: Relationship, field_class: FieldClass) -> bool:
    """Check whether a viewer in ``relationship`` may edit ``field_class``."""
    result = access_for(relationship, field_class).can_edit
    logger.debug("can_edit(%s, %s) = %s", relationship, field_class, result)
    return result


def visible_classes(relationship: Relationship) -> list[FieldClass]:
    """Field classes visible to ``relationship``, in declaration order."""
    return [fc for fc in FieldClass if access_for(relationship, fc).can_view]


def editable_classes(relationship: Relationship) -> list[FieldClass]:
    """Field classes editable by ``relationship``, in declaration order."""
    return [fc for fc in FieldClass if access_for(relationship, fc).can_edit]
