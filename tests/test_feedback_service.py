"""Tests for FeedbackService and the feedback read rule."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.exceptions import ForbiddenError, UserNotFoundError, ValidationError
from profile_api.models.dto.feedback import FeedbackCreate
from profile_api.models.orm.feedback import FeedbackORM
from profile_api.security.feedback_visibility import can_read_feedback
from profile_api.services.feedback_service import FeedbackService

from conftest import Org


class TestCanReadFeedback:
    """Tests for can_read_feedback."""

    def test_author_and_recipient(self):
        """Both parties may read the record."""
        author, recipient = uuid4(), uuid4()
        assert can_read_feedback(author, author, recipient, None)
        assert can_read_feedback(recipient, author, recipient, None)

    def test_recipient_manager(self):
        """The recipient's direct manager may read it."""
        author, recipient, manager = uuid4(), uuid4(), uuid4()
        assert can_read_feedback(manager, author, recipient, manager)

    def test_stranger(self):
        """Anyone else may not."""
        author, recipient, manager = uuid4(), uuid4(), uuid4()
        assert not can_read_feedback(uuid4(), author, recipient, manager)

    def test_authors_manager(self):
        """Managing the author grants nothing."""
        author, recipient = uuid4(), uuid4()
        assert not can_read_feedback(uuid4(), author, recipient, None)


class TestCreateFeedback:
    """Tests for FeedbackService.create_feedback."""

    async def test_create(self, session: AsyncSession, org: Org):
        """Feedback is stored trimmed with both display names."""
        service = FeedbackService(session)
        feedback = await service.create_feedback(
            org.teammate.principal,
            FeedbackCreate(recipient_id=org.employee.id, text="  Great pairing session!  "),
        )

        assert feedback.text == "Great pairing session!"
        assert feedback.author_name == "Sam Ortiz"
        assert feedback.recipient_name == "Jo Novak"
        assert feedback.ai_polished is False

    async def test_polished_flag_kept(self, session: AsyncSession, org: Org):
        """The AI flag is recorded as given."""
        service = FeedbackService(session)
        feedback = await service.create_feedback(
            org.teammate.principal,
            FeedbackCreate(recipient_id=org.employee.id, text="Thanks!", ai_polished=True),
        )
        assert feedback.ai_polished is True

    async def test_self_feedback_forbidden(self, session: AsyncSession, org: Org):
        """Nobody reviews themselves."""
        service = FeedbackService(session)
        with pytest.raises(ForbiddenError):
            await service.create_feedback(
                org.employee.principal,
                FeedbackCreate(recipient_id=org.employee.id, text="I am great"),
            )

    async def test_blank_text(self, session: AsyncSession, org: Org):
        """Whitespace-only text is rejected."""
        service = FeedbackService(session)
        with pytest.raises(ValidationError) as exc_info:
            await service.create_feedback(
                org.teammate.principal,
                FeedbackCreate(recipient_id=org.employee.id, text="   "),
            )
        assert exc_info.value.field_errors[0]["field"] == "text"

    async def test_unknown_recipient(self, session: AsyncSession, org: Org):
        """Recipients must exist."""
        service = FeedbackService(session)
        with pytest.raises(UserNotFoundError):
            await service.create_feedback(
                org.teammate.principal,
                FeedbackCreate(recipient_id=uuid4(), text="Hello there"),
            )


class TestListForUser:
    """Tests for FeedbackService.list_for_user."""

    async def test_visibility(self, session: AsyncSession, org: Org):
        """Author, recipient and recipient's manager read it; others do not."""
        author, recipient = org.teammate, org.employee
        await FeedbackService(session).create_feedback(
            author.principal,
            FeedbackCreate(recipient_id=recipient.id, text="Solid code reviews"),
        )
        await session.commit()

        async def visible_to(viewer) -> list[str]:
            records = await FeedbackService(session).list_for_user(viewer.principal, recipient.id)
            return [record.text for record in records]

        assert await visible_to(author) == ["Solid code reviews"]
        assert await visible_to(recipient) == ["Solid code reviews"]
        assert await visible_to(org.manager) == ["Solid code reviews"]
        assert await visible_to(org.outsider) == []

    async def test_coworker_sees_only_own(self, session: AsyncSession, org: Org):
        """A coworker who also wrote feedback sees just their own record."""
        service = FeedbackService(session)
        await service.create_feedback(
            org.teammate.principal,
            FeedbackCreate(recipient_id=org.employee.id, text="From Sam"),
        )
        await service.create_feedback(
            org.outsider.principal,
            FeedbackCreate(recipient_id=org.employee.id, text="From Carl"),
        )

        records = await FeedbackService(session).list_for_user(
            org.outsider.principal, org.employee.id
        )
        assert [record.text for record in records] == ["From Carl"]

    async def test_newest_first(self, session: AsyncSession, org: Org):
        """Records are ordered by creation time, newest first."""
        now = datetime.now(timezone.utc)
        for offset, text in ((2, "oldest"), (1, "middle"), (0, "newest")):
            session.add(
                FeedbackORM(
                    author_id=org.teammate.id,
                    recipient_id=org.employee.id,
                    text=text,
                    created_at=now - timedelta(hours=offset),
                )
            )
        await session.commit()

        records = await FeedbackService(session).list_for_user(
            org.employee.principal, org.employee.id
        )
        assert [record.text for record in records] == ["newest", "middle", "oldest"]

    async def test_unknown_target(self, session: AsyncSession, org: Org):
        """Listing for an unknown user is not found."""
        with pytest.raises(UserNotFoundError):
            await FeedbackService(session).list_for_user(org.employee.principal, uuid4())


class TestAuthoredAndReceived:
    """Tests for list_authored and list_received."""

    async def test_both_sides(self, session: AsyncSession, org: Org):
        """Authors see what they wrote; recipients what they got."""
        service = FeedbackService(session)
        await service.create_feedback(
            org.teammate.principal,
            FeedbackCreate(recipient_id=org.employee.id, text="Nice demo"),
        )

        authored = await FeedbackService(session).list_authored(org.teammate.principal)
        received = await FeedbackService(session).list_received(org.employee.principal)
        nothing = await FeedbackService(session).list_received(org.teammate.principal)

        assert [record.text for record in authored] == ["Nice demo"]
        assert [record.recipient_name for record in authored] == ["Jo Novak"]
        assert [record.author_name for record in received] == ["Sam Ortiz"]
        assert nothing == []
