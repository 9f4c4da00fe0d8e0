"""Viewer-to-target relationship rule."""

from collections.abc import Mapping
from uuid import UUID

from profile_api.models.domain.access import Relationship


def determine_relationship(
    viewer_id: UUID,
    target_id: UUID,
    target_manager_id: UUID | None,
) -> Relationship:
    """Derive the viewer's relationship to a target user.

    One hop only: peers, managers of unrelated users and skip-level
    managers all collapse to COWORKER.

    Args:
        viewer_id: Authenticated user
        target_id: User being viewed or edited
        target_manager_id: Target's direct manager, if any

    Returns:
        Relationship of viewer to target
    """
    if viewer_id == target_id:
        return Relationship.SELF
    if target_manager_id is not None and target_manager_id == viewer_id:
        return Relationship.MANAGER
    return Relationship.COWORKER


def find_manager_cycle(manager_of: Mapping[str, str | None]) -> list[str] | None:
    """Find a cycle in a manager graph.

    Args:
        manager_of: Person key to their manager's key (None for no manager)

    Returns:
        Keys forming the first cycle found (a self-manager is a cycle of
        one), or None if the graph is a forest
    """
    done: set[str] = set()
    for start in manager_of:
        path: list[str] = []
        on_path: set[str] = set()
        node: str | None = start
        while node is not None and node not in done:
            if node in on_path:
                return path[path.index(node):]
            path.append(node)
            on_path.add(node)
            node = manager_of.get(node)
        done.update(path)
    return None
