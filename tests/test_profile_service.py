"""Tests for ProfileService against a real schema."""

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.exceptions import (
    FieldClassForbiddenError,
    ProfileNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from profile_api.models.orm.user import UserORM
from profile_api.services.profile_service import ProfileService

from conftest import Org


class TestGetProfile:
    """Tests for ProfileService.get_profile."""

    async def test_self_view(self, session: AsyncSession, org: Org):
        """Owners see their own sensitive data."""
        service = ProfileService(session)
        profile = await service.get_profile(org.employee.principal, org.employee.id)

        assert profile.salary == Decimal("100000.00")
        assert profile.metadata.relationship == "SELF"

    async def test_manager_view(self, session: AsyncSession, org: Org):
        """Direct managers see sensitive data of their reports."""
        service = ProfileService(session)
        profile = await service.get_profile(org.manager.principal, org.employee.id)

        assert profile.personal_email == "e@p.com"
        assert profile.metadata.relationship == "MANAGER"

    async def test_coworker_view(self, session: AsyncSession, org: Org):
        """Coworkers get public fields with sensitive fields unset."""
        service = ProfileService(session)
        profile = await service.get_profile(org.outsider.principal, org.employee.id)

        assert profile.legal_first_name == "Eve"
        assert profile.job_title == "Software Engineer"
        assert "salary" not in profile.model_fields_set
        assert "personal_email" not in profile.model_fields_set
        assert profile.metadata.relationship == "OTHER"

    async def test_peer_view_is_coworker(self, session: AsyncSession, org: Org):
        """Two reports of one manager are coworkers."""
        service = ProfileService(session)
        profile = await service.get_profile(org.teammate.principal, org.employee.id)
        assert profile.metadata.relationship == "OTHER"

    async def test_unknown_user(self, session: AsyncSession, org: Org):
        """Unknown users are not found."""
        service = ProfileService(session)
        with pytest.raises(UserNotFoundError):
            await service.get_profile(org.employee.principal, uuid4())

    async def test_user_without_profile(self, session: AsyncSession, org: Org):
        """A user with no profile row is reported as a missing profile."""
        user = UserORM(
            employee_id="E-3000",
            email="new@example.com",
            password_hash="x",
            role="EMPLOYEE",
        )
        session.add(user)
        await session.commit()

        service = ProfileService(session)
        with pytest.raises(ProfileNotFoundError):
            await service.get_profile(org.employee.principal, user.id)


class TestUpdateProfile:
    """Tests for ProfileService.update_profile."""

    async def test_self_edits_non_sensitive(self, session: AsyncSession, org: Org):
        """A bio change leaves other fields alone and bumps updatedAt."""
        await session.refresh(org.employee.profile)
        before = org.employee.profile.updated_at

        service = ProfileService(session)
        result = await service.update_profile(
            org.employee.principal, org.employee.id, {"bio": "new"}
        )
        await session.commit()

        assert result.bio == "new"
        assert result.salary == Decimal("100000.00")
        assert result.preferred_name == "Jo"
        assert result.updated_at > before

        await session.refresh(org.employee.profile)
        assert org.employee.profile.bio == "new"

    async def test_manager_blocked_on_sensitive(self, session: AsyncSession, org: Org):
        """A manager's sensitive edit changes nothing."""
        service = ProfileService(session)
        with pytest.raises(FieldClassForbiddenError):
            await service.update_profile(
                org.manager.principal, org.employee.id, {"personalEmail": "x@p.com"}
            )
        await session.rollback()

        await session.refresh(org.employee.profile)
        assert org.employee.profile.personal_email == "e@p.com"

    async def test_mixed_patch_is_all_or_nothing(self, session: AsyncSession, org: Org):
        """An allowed field next to a forbidden one is not applied either."""
        service = ProfileService(session)
        with pytest.raises(FieldClassForbiddenError):
            await service.update_profile(
                org.manager.principal,
                org.employee.id,
                {"bio": "manager wrote this", "salary": "1"},
            )
        await session.rollback()

        await session.refresh(org.employee.profile)
        assert org.employee.profile.bio == "old"

    async def test_manager_edits_report_bio(self, session: AsyncSession, org: Org):
        """Managers may edit the public profile of a direct report."""
        service = ProfileService(session)
        result = await service.update_profile(
            org.manager.principal, org.employee.id, {"jobTitle": "Senior Engineer"}
        )
        assert result.job_title == "Senior Engineer"
        assert result.metadata.relationship == "MANAGER"

    async def test_coworker_cannot_edit(self, session: AsyncSession, org: Org):
        """Coworkers edit nothing."""
        service = ProfileService(session)
        with pytest.raises(FieldClassForbiddenError):
            await service.update_profile(org.outsider.principal, org.employee.id, {"bio": "hi"})

    async def test_self_edits_sensitive(self, session: AsyncSession, org: Org):
        """Owners may change their own personal data."""
        service = ProfileService(session)
        result = await service.update_profile(
            org.employee.principal,
            org.employee.id,
            {"personalEmail": "eve@home.example", "emergencyContactName": "Ana"},
        )
        assert result.personal_email == "eve@home.example"
        assert result.emergency_contact_name == "Ana"

    async def test_self_cannot_edit_system_managed(self, session: AsyncSession, org: Org):
        """Department is owned by HR systems."""
        service = ProfileService(session)
        with pytest.raises(FieldClassForbiddenError):
            await service.update_profile(
                org.employee.principal, org.employee.id, {"department": "Sales"}
            )

    async def test_null_leaves_value(self, session: AsyncSession, org: Org):
        """Null values are ignored rather than clearing the attribute."""
        service = ProfileService(session)
        result = await service.update_profile(
            org.employee.principal, org.employee.id, {"bio": None, "skills": "SQL"}
        )
        assert result.bio == "old"
        assert result.skills == "SQL"

    async def test_empty_patch_keeps_timestamp(self, session: AsyncSession, org: Org):
        """A patch that changes nothing does not touch updatedAt."""
        await session.refresh(org.employee.profile)
        before = org.employee.profile.updated_at

        service = ProfileService(session)
        result = await service.update_profile(org.employee.principal, org.employee.id, {})
        assert result.updated_at == before

    async def test_invalid_value(self, session: AsyncSession, org: Org):
        """Malformed values are rejected with the field name."""
        service = ProfileService(session)
        with pytest.raises(ValidationError) as exc_info:
            await service.update_profile(
                org.employee.principal, org.employee.id, {"personalEmail": "nope"}
            )
        assert exc_info.value.field_errors[0]["field"] == "personalEmail"

    async def test_unknown_target(self, session: AsyncSession, org: Org):
        """Patching an unknown user is not found."""
        service = ProfileService(session)
        with pytest.raises(UserNotFoundError):
            await service.update_profile(org.employee.principal, uuid4(), {"bio": "x"})
