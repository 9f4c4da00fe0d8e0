"""Absence request lifecycle service."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.exceptions import (
    AbsenceNotFoundError,
    AbsenceTransitionConflictError,
    ForbiddenError,
    UserNotFoundError,
    ValidationError,
)
from profile_api.models.domain.absence import (
    ACTION_TARGETS,
    AbsenceAction,
    AbsenceStatus,
    AbsenceType,
    can_transition,
)
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.absence import AbsenceCreate, AbsenceResponse, AbsenceStatusUpdate
from profile_api.repositories.absence_repository import AbsenceRepository
from profile_api.repositories.user_repository import UserRepository
from profile_api.utils.dates import service_today
from profile_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)


def validate_absence_dates(
    start_date: date,
    end_date: date,
    absence_type: AbsenceType,
    today: date,
) -> None:
    """Check a requested date range.

    Sick leave may lie in the past; every other type must start and end
    today or later.

    Raises:
        ValidationError: Listing every offending date
    """
    field_errors = []
    if end_date < start_date:
        field_errors.append({"field": "endDate", "reason": "End date must be on or after start date"})
    if not absence_type.allows_past_dates:
        if start_date < today:
            field_errors.append({"field": "startDate", "reason": "Start date cannot be in the past"})
        if end_date < today:
            field_errors.append({"field": "endDate", "reason": "End date cannot be in the past"})
    if field_errors:
        raise ValidationError("Invalid absence dates", field_errors)


class AbsenceService:
    """Service for submitting, deciding and completing absence requests."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.absence_repo = AbsenceRepository(session)
        self.user_repo = UserRepository(session)

    async def submit(self, requester: AuthenticatedUser, request: AbsenceCreate) -> AbsenceResponse:
        """Submit a new absence request.

        The requester's current manager is snapshotted onto the request and
        is the only user who may decide it.

        Args:
            requester: Authenticated principal
            request: Dates, type and optional note

        Returns:
            Created request in PENDING

        Raises:
            UserNotFoundError: If the requester does not exist
            ValidationError: If the dates are invalid
        """
        user = await self.user_repo.get(requester.user_id)
        if user is None:
            raise UserNotFoundError(requester.user_id)

        validate_absence_dates(request.start_date, request.end_date, request.type, service_today())

        absence = await self.absence_repo.create(
            user_id=user.id,
            manager_id=user.manager_id,
            start_date=request.start_date,
            end_date=request.end_date,
            type=request.type.value,
            status=AbsenceStatus.PENDING.value,
            note=request.note,
        )
        logger.info("Absence %s submitted by %s", absence.id, user.id)
        return AbsenceResponse.model_validate(absence)

    async def list_mine(self, requester: AuthenticatedUser) -> list[AbsenceResponse]:
        """List the requester's own requests, newest start date first."""
        absences = await self.absence_repo.list_by_user(requester.user_id)
        return [AbsenceResponse.model_validate(a) for a in absences]

    async def list_pending_for_manager(self, manager: AuthenticatedUser) -> list[AbsenceResponse]:
        """List requests awaiting the manager, oldest start date first."""
        absences = await self.absence_repo.list_pending_for_manager(manager.user_id)
        return [AbsenceResponse.model_validate(a) for a in absences]

    async def count_pending_for(self, manager_id: UUID, user_id: UUID) -> int:
        """Count one report's requests awaiting a manager."""
        return await self.absence_repo.count_pending(manager_id, user_id)

    async def update_status(
        self,
        actor: AuthenticatedUser,
        absence_id: UUID,
        request: AbsenceStatusUpdate,
    ) -> AbsenceResponse:
        """Approve or reject a pending request.

        Args:
            actor: Authenticated principal; must be the snapshotted manager
            absence_id: Request UUID
            request: Action and optional note

        Returns:
            Updated request

        Raises:
            AbsenceNotFoundError: If the request does not exist
            ForbiddenError: If the actor is not the snapshotted manager
            AbsenceTransitionConflictError: If the request is no longer pending
            ValidationError: If the action is missing or unknown
        """
        absence = await self.absence_repo.get(absence_id, for_update=True)
        if absence is None:
            raise AbsenceNotFoundError(absence_id)

        if absence.manager_id is None or absence.manager_id != actor.user_id:
            raise ForbiddenError("Only the manager can act on this request")

        current = AbsenceStatus(absence.status)
        if current is not AbsenceStatus.PENDING:
            raise AbsenceTransitionConflictError(absence_id, current.value)

        try:
            action = AbsenceAction.parse(request.action)
        except ValueError as e:
            raise ValidationError.for_field("action", str(e)) from e

        target = ACTION_TARGETS[action]
        if not can_transition(current, target):
            raise AbsenceTransitionConflictError(absence_id, current.value)

        # Guarded write; a concurrent decision leaves zero rows to update
        updated = await self.absence_repo.transition_status(
            absence_id,
            expected=AbsenceStatus.PENDING,
            target=target,
            note=request.note,
            replace_note=action is AbsenceAction.REJECT,
        )
        if updated == 0:
            raise AbsenceTransitionConflictError(absence_id)

        await self.session.refresh(absence)
        logger.info("Absence %s %s by %s", absence_id, target.value.lower(), actor.user_id)
        return AbsenceResponse.model_validate(absence)

    async def approve(
        self, actor: AuthenticatedUser, absence_id: UUID, note: str | None = None
    ) -> AbsenceResponse:
        """Approve a pending request."""
        request = AbsenceStatusUpdate(action=AbsenceAction.APPROVE.value, note=note)
        return await self.update_status(actor, absence_id, request)

    async def reject(
        self, actor: AuthenticatedUser, absence_id: UUID, note: str | None = None
    ) -> AbsenceResponse:
        """Reject a pending request, replacing its note."""
        request = AbsenceStatusUpdate(action=AbsenceAction.REJECT.value, note=note)
        return await self.update_status(actor, absence_id, request)

    async def sweep_completion(self, as_of: date | None = None) -> int:
        """Complete every approved request that ended before ``as_of``.

        Each row is promoted in its own savepoint; a failing row is logged
        and skipped. Running twice for the same day promotes nothing the
        second time.

        Args:
            as_of: Cut-off date (defaults to today in the service time zone)

        Returns:
            Number of requests completed
        """
        as_of = as_of or service_today()
        candidates = await self.absence_repo.list_completable(as_of)

        completed = 0
        for absence in candidates:
            try:
                async with self.session.begin_nested():
                    completed += await self.absence_repo.transition_status(
                        absence.id,
                        expected=AbsenceStatus.APPROVED,
                        target=AbsenceStatus.COMPLETED,
                    )
            except SQLAlchemyError as e:
                log_error(logger, f"Failed to complete absence {absence.id}", e)

        logger.info("Absence sweep as of %s completed %d request(s)", as_of, completed)
        return completed
