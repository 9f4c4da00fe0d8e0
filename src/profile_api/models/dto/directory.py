"""Directory DTOs."""

from uuid import UUID

from profile_api.models.dto.base import ApiModel


class DirectoryEntry(ApiModel):
    """One coworker row in the directory.

    ``pending_absence_count`` is only set when the viewer manages the row's
    user; the router serialises with ``exclude_unset`` so other rows omit it.
    """

    user_id: UUID
    employee_id: str
    preferred_name: str
    legal_first_name: str
    legal_last_name: str
    job_title: str | None = None
    department: str | None = None
    work_location_type: str | None = None
    profile_photo_url: str | None = None
    relationship: str
    direct_report: bool
    pending_absence_count: int | None = None
