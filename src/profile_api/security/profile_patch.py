"""Sparse profile patch planning.

Turns a raw patch body into a set of attribute assignments in four steps:
normalise keys, partition by field class, authorize all-or-nothing against
the permission matrix, then validate values. Nothing is applied until every
step has passed.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import pydantic
from pydantic.alias_generators import to_camel

from profile_api.exceptions import FieldClassForbiddenError, ValidationError
from profile_api.models.domain.access import FieldClass, Relationship
from profile_api.models.dto.profile import ProfilePatch
from profile_api.security.field_classifier import CLASSIFIED_FIELDS, classify
from profile_api.security.permission_matrix import can_edit

logger = logging.getLogger(__name__)

# Accept camelCase wire names and snake_case attribute names
_KEY_TO_FIELD: dict[str, str] = {}
for _field in CLASSIFIED_FIELDS:
    _KEY_TO_FIELD[_field] = _field
    _KEY_TO_FIELD[to_camel(_field)] = _field


@dataclass(frozen=True)
class PatchPlan:
    """Validated attribute assignments for one profile update."""

    changes: dict[str, Any]
    classes: frozenset[FieldClass]

    @property
    def is_empty(self) -> bool:
        """True when the patch changes nothing."""
        return not self.changes


def normalize_patch(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map patch keys to attribute names and drop nulls.

    Args:
        raw: Patch body as received

    Returns:
        Attribute name to new value, without null entries

    Raises:
        ValidationError: If any key is not a classified profile attribute
    """
    unknown = [key for key in raw if key not in _KEY_TO_FIELD]
    if unknown:
        raise ValidationError(
            "Unknown profile fields",
            [{"field": key, "reason": "Unknown field"} for key in unknown],
        )
    # null means "no change"
    return {_KEY_TO_FIELD[key]: value for key, value in raw.items() if value is not None}


def partition_patch(changes: Mapping[str, Any]) -> dict[FieldClass, dict[str, Any]]:
    """Group attribute changes by field class."""
    partitions: dict[FieldClass, dict[str, Any]] = {}
    for field, value in changes.items():
        partitions.setdefault(classify(field), {})[field] = value
    return partitions


def authorize_patch(
    relationship: Relationship,
    partitions: Mapping[FieldClass, Mapping[str, Any]],
) -> None:
    """Reject the whole patch if any touched class is not editable.

    Classes are checked in declaration order so the reported class is
    deterministic.

    Raises:
        FieldClassForbiddenError: Naming the first forbidden class
    """
    for field_class in FieldClass:
        if partitions.get(field_class) and not can_edit(relationship, field_class):
            logger.warning(
                "Rejected profile patch: %s may not edit %s fields", relationship, field_class
            )
            raise FieldClassForbiddenError(field_class)


def validate_patch(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate new values and coerce them to attribute types.

    Args:
        changes: Authorized attribute changes

    Returns:
        Coerced values for the same keys

    Raises:
        ValidationError: Listing every offending field
    """
    try:
        validated = ProfilePatch.model_validate(dict(changes))
    except pydantic.ValidationError as e:
        field_errors = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            field_errors.append({"field": to_camel(field), "reason": error["msg"]})
        raise ValidationError("Invalid profile fields", field_errors) from e
    return {field: getattr(validated, field) for field in changes}


def plan_patch(relationship: Relationship, raw: Mapping[str, Any]) -> PatchPlan:
    """Run the full patch pipeline for a viewer.

    Args:
        relationship: Viewer's relationship to the profile owner
        raw: Patch body as received

    Returns:
        PatchPlan ready to apply

    Raises:
        ValidationError: Unknown keys or invalid values
        FieldClassForbiddenError: A touched class is not editable
    """
    changes = normalize_patch(raw)
    partitions = partition_patch(changes)
    authorize_patch(relationship, partitions)
    return PatchPlan(changes=validate_patch(changes), classes=frozenset(partitions))


def apply_patch(target: Any, plan: PatchPlan) -> None:
    """Assign planned values onto ``target``."""
    for field, value in plan.changes.items():
        setattr(target, field, value)
