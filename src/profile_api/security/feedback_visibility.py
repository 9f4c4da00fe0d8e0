"""Feedback read rule."""

from uuid import UUID


def can_read_feedback(
    viewer_id: UUID,
    author_id: UUID,
    recipient_id: UUID,
    recipient_manager_id: UUID | None,
) -> bool:
    """Check whether a viewer may read one feedback record.

    Readable by its author, its recipient and the recipient's direct
    manager. Manager visibility is one hop.
    """
    if viewer_id in (author_id, recipient_id):
        return True
    return recipient_manager_id is not None and recipient_manager_id == viewer_id
