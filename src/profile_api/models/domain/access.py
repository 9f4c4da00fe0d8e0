"""Access-control domain enums."""

from enum import StrEnum


class Relationship(StrEnum):
    """Viewer's position relative to a target user."""

    SELF = "SELF"
    MANAGER = "MANAGER"
    COWORKER = "COWORKER"

    @property
    def wire_label(self) -> str:
        """External name of the relationship.

        ``COWORKER`` is published as ``OTHER`` for client compatibility.
        """
        if self is Relationship.COWORKER:
            return "OTHER"
        return self.value


class FieldClass(StrEnum):
    """Visibility/edit class of a profile attribute."""

    SYSTEM_MANAGED = "SYSTEM_MANAGED"
    NON_SENSITIVE = "NON_SENSITIVE"
    SENSITIVE = "SENSITIVE"
