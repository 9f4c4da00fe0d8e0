"""Tests for the relationship x field-class permission matrix."""

import pytest

from profile_api.models.domain.access import FieldClass, Relationship
from profile_api.security.permission_matrix import (
    can_edit,
    can_view,
    editable_classes,
    visible_classes,
)


class TestPermissionMatrix:
    """Tests for individual matrix cells."""

    @pytest.mark.parametrize(
        "relationship,field_class,view,edit",
        [
            (Relationship.SELF, FieldClass.SYSTEM_MANAGED, True, False),
            (Relationship.SELF, FieldClass.NON_SENSITIVE, True, True),
            (Relationship.SELF, FieldClass.SENSITIVE, True, True),
            (Relationship.MANAGER, FieldClass.SYSTEM_MANAGED, True, False),
            (Relationship.MANAGER, FieldClass.NON_SENSITIVE, True, True),
            (Relationship.MANAGER, FieldClass.SENSITIVE, True, False),
            (Relationship.COWORKER, FieldClass.SYSTEM_MANAGED, True, False),
            (Relationship.COWORKER, FieldClass.NON_SENSITIVE, True, False),
            (Relationship.COWORKER, FieldClass.SENSITIVE, False, False),
        ],
    )
    def test_cell(
        self, relationship: Relationship, field_class: FieldClass, view: bool, edit: bool
    ):
        """Each cell grants exactly the documented access."""
        assert can_view(relationship, field_class) is view
        assert can_edit(relationship, field_class) is edit


class TestMatrixInvariants:
    """Tests for properties that hold across the whole matrix."""

    @pytest.mark.parametrize("relationship", list(Relationship))
    def test_edit_implies_view(self, relationship: Relationship):
        """Nothing is editable that is not visible."""
        for field_class in FieldClass:
            if can_edit(relationship, field_class):
                assert can_view(relationship, field_class)

    @pytest.mark.parametrize("relationship", list(Relationship))
    def test_system_managed_never_editable(self, relationship: Relationship):
        """HR-owned attributes are read-only for everyone."""
        assert not can_edit(relationship, FieldClass.SYSTEM_MANAGED)

    def test_only_self_edits_sensitive(self):
        """Sensitive attributes are editable by their owner alone."""
        editors = [r for r in Relationship if can_edit(r, FieldClass.SENSITIVE)]
        assert editors == [Relationship.SELF]


class TestClassLists:
    """Tests for visible_classes and editable_classes."""

    def test_coworker_classes(self):
        """Coworkers see two classes and edit none."""
        assert visible_classes(Relationship.COWORKER) == [
            FieldClass.SYSTEM_MANAGED,
            FieldClass.NON_SENSITIVE,
        ]
        assert editable_classes(Relationship.COWORKER) == []

    def test_manager_classes(self):
        """Managers see everything and edit the public profile."""
        assert visible_classes(Relationship.MANAGER) == list(FieldClass)
        assert editable_classes(Relationship.MANAGER) == [FieldClass.NON_SENSITIVE]

    def test_self_classes(self):
        """Owners edit everything except HR-managed data."""
        assert editable_classes(Relationship.SELF) == [
            FieldClass.NON_SENSITIVE,
            FieldClass.SENSITIVE,
        ]
