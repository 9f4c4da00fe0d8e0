"""Employee profile domain enums."""

from enum import StrEnum


class EmploymentStatus(StrEnum):
    """Employment status, controlled by HR systems."""

    ACTIVE = "ACTIVE"
    ON_LEAVE = "ON_LEAVE"


class WorkLocationType(StrEnum):
    """Where an employee usually works."""

    REMOTE = "REMOTE"
    HYBRID = "HYBRID"
    ONSITE = "ONSITE"
