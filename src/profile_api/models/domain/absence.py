"""Absence request domain model and lifecycle."""

from enum import StrEnum
from types import MappingProxyType
from typing import Final


class AbsenceStatus(StrEnum):
    """Absence request status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"

    @property
    def is_terminal(self) -> bool:
        """Terminal statuses never change again."""
        return self in (AbsenceStatus.REJECTED, AbsenceStatus.COMPLETED)


class AbsenceType(StrEnum):
    """Kind of absence."""

    VACATION = "VACATION"
    SICK = "SICK"
    PERSONAL = "PERSONAL"
    OTHER = "OTHER"

    @property
    def allows_past_dates(self) -> bool:
        """Sick leave may be recorded after the fact."""
        return self is AbsenceType.SICK


class AbsenceAction(StrEnum):
    """Manager decision on a pending request."""

    APPROVE = "APPROVE"
    REJECT = "REJECT"

    @classmethod
    def parse(cls, raw: str | None) -> "AbsenceAction":
        """Parse an action name case-insensitively.

        Raises:
            ValueError: If the action is missing or unknown
        """
        if raw is None or not raw.strip():
            raise ValueError("Action is required")
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported action: {raw}") from None


# Every edge of the lifecycle. The sweep is the only way into COMPLETED.
ABSENCE_TRANSITIONS: Final = MappingProxyType(
    {
        AbsenceStatus.PENDING: frozenset({AbsenceStatus.APPROVED, AbsenceStatus.REJECTED}),
        AbsenceStatus.APPROVED: frozenset({AbsenceStatus.COMPLETED}),
        AbsenceStatus.REJECTED: frozenset(),
        AbsenceStatus.COMPLETED: frozenset(),
    }
)

ACTION_TARGETS: Final = MappingProxyType(
    {
        AbsenceAction.APPROVE: AbsenceStatus.APPROVED,
        AbsenceAction.REJECT: AbsenceStatus.REJECTED,
    }
)


def can_transition(current: AbsenceStatus, target: AbsenceStatus) -> bool:
    """Check whether the lifecycle allows ``current -> target``."""
    return target in ABSENCE_TRANSITIONS[current]
