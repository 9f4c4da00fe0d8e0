"""Employee absence repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import func, select, update

from profile_api.models.domain.absence import AbsenceStatus
from profile_api.models.orm.base import utcnow
from profile_api.models.orm.employee_absence import EmployeeAbsenceORM
from profile_api.repositories.base import BaseRepository


class AbsenceRepository(BaseRepository[EmployeeAbsenceORM]):
    """Repository for absence request operations."""

    model = EmployeeAbsenceORM

    async def list_by_user(self, user_id: UUID) -> list[EmployeeAbsenceORM]:
        """List a user's requests, newest start date first."""
        result = await self.session.execute(
            select(EmployeeAbsenceORM)
            .where(EmployeeAbsenceORM.user_id == user_id)
            .order_by(EmployeeAbsenceORM.start_date.desc(), EmployeeAbsenceORM.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_pending_for_manager(self, manager_id: UUID) -> list[EmployeeAbsenceORM]:
        """List pending requests awaiting a manager, oldest start date first."""
        result = await self.session.execute(
            select(EmployeeAbsenceORM)
            .where(
                EmployeeAbsenceORM.manager_id == manager_id,
                EmployeeAbsenceORM.status == AbsenceStatus.PENDING.value,
            )
            .order_by(EmployeeAbsenceORM.start_date.asc(), EmployeeAbsenceORM.created_at.asc())
        )
        return list(result.scalars().all())

    async def count_pending(self, manager_id: UUID, user_id: UUID) -> int:
        """Count one user's pending requests awaiting a manager."""
        result = await self.session.execute(
            select(func.count())
            .select_from(EmployeeAbsenceORM)
            .where(
                EmployeeAbsenceORM.manager_id == manager_id,
                EmployeeAbsenceORM.user_id == user_id,
                EmployeeAbsenceORM.status == AbsenceStatus.PENDING.value,
            )
        )
        return result.scalar_one()

    async def pending_counts_by_user(self, manager_id: UUID, user_ids: list[UUID]) -> dict[UUID, int]:
        """Count pending requests per user in one grouped query.

        Args:
            manager_id: Manager the requests await
            user_ids: Users to count for

        Returns:
            Dict mapping user ID to count; users without pending requests are absent
        """
        if not user_ids:
            return {}
        result = await self.session.execute(
            select(EmployeeAbsenceORM.user_id, func.count())
            .where(
                EmployeeAbsenceORM.manager_id == manager_id,
                EmployeeAbsenceORM.user_id.in_(user_ids),
                EmployeeAbsenceORM.status == AbsenceStatus.PENDING.value,
            )
            .group_by(EmployeeAbsenceORM.user_id)
        )
        return {user_id: count for user_id, count in result.all()}

    async def transition_status(
        self,
        absence_id: UUID,
        expected: AbsenceStatus,
        target: AbsenceStatus,
        note: str | None = None,
        replace_note: bool = False,
    ) -> int:
        """Move a request between statuses only if it is still in ``expected``.

        Args:
            absence_id: Request UUID
            expected: Status the row must currently hold
            target: New status
            note: Replacement note
            replace_note: Write ``note`` even when it is None

        Returns:
            Number of rows updated (0 when the guard did not match)
        """
        values: dict[str, Any] = {"status": target.value, "updated_at": utcnow()}
        if replace_note:
            values["note"] = note

        result = await self.session.execute(
            update(EmployeeAbsenceORM)
            .where(
                EmployeeAbsenceORM.id == absence_id,
                EmployeeAbsenceORM.status == expected.value,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount

    async def list_completable(self, as_of: date) -> list[EmployeeAbsenceORM]:
        """Lock and list approved requests that ended before ``as_of``."""
        result = await self.session.execute(
            select(EmployeeAbsenceORM)
            .where(
                EmployeeAbsenceORM.status == AbsenceStatus.APPROVED.value,
                EmployeeAbsenceORM.end_date < as_of,
            )
            .order_by(EmployeeAbsenceORM.end_date.asc())
            .with_for_update()
        )
        return list(result.scalars().all())
