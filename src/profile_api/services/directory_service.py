"""Coworker directory service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.models.domain.access import Relationship
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.directory import DirectoryEntry
from profile_api.repositories.absence_repository import AbsenceRepository
from profile_api.repositories.profile_repository import ProfileRepository
from profile_api.security.profile_projection import first_name_of
from profile_api.security.relationships import determine_relationship
from profile_api.utils.validation import sanitize_department, sanitize_search

logger = logging.getLogger(__name__)


class DirectoryService:
    """Service for the active-employee directory."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.profile_repo = ProfileRepository(session)
        self.absence_repo = AbsenceRepository(session)

    async def list_directory(
        self,
        viewer: AuthenticatedUser,
        search: str | None = None,
        department: str | None = None,
        direct_reports_only: bool = False,
    ) -> list[DirectoryEntry]:
        """List active coworkers visible in the directory.

        Args:
            viewer: Authenticated principal (never listed)
            search: Case-insensitive substring filter
            department: Case-insensitive exact department filter
            direct_reports_only: Keep only the viewer's direct reports

        Returns:
            Entries sorted by preferred name, then legal first name
        """
        rows = await self.profile_repo.list_active(
            exclude_user_id=viewer.user_id,
            search=sanitize_search(search),
            department=sanitize_department(department),
        )

        candidates = []
        for profile, user in rows:
            relationship = determine_relationship(viewer.user_id, user.id, user.manager_id)
            if direct_reports_only and relationship is not Relationship.MANAGER:
                continue
            candidates.append((profile, user, relationship))

        # One grouped query for every direct report's pending count (avoids N+1)
        report_ids = [user.id for _, user, rel in candidates if rel is Relationship.MANAGER]
        pending_counts = await self.absence_repo.pending_counts_by_user(viewer.user_id, report_ids)

        entries = []
        for profile, user, relationship in candidates:
            values = {
                "user_id": user.id,
                "employee_id": user.employee_id,
                "preferred_name": first_name_of(profile),
                "legal_first_name": profile.legal_first_name,
                "legal_last_name": profile.legal_last_name,
                "job_title": profile.job_title,
                "department": profile.department,
                "work_location_type": profile.work_location_type,
                "profile_photo_url": profile.profile_photo_url,
                "relationship": relationship.wire_label,
                "direct_report": relationship is Relationship.MANAGER,
            }
            if relationship is Relationship.MANAGER:
                values["pending_absence_count"] = pending_counts.get(user.id, 0)
            entries.append(DirectoryEntry(**values))

        entries.sort(key=lambda e: (e.preferred_name.lower(), e.legal_first_name.lower()))
        logger.debug("Directory for %s: %d entries", viewer.user_id, len(entries))
        return entries

    async def get_departments(self) -> list[str]:
        """Get the distinct departments of active employees."""
        return await self.profile_repo.list_departments()
