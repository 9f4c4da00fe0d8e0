"""Tests for profile attribute classification."""

import pytest

from profile_api.models.domain.access import FieldClass
from profile_api.models.orm.employee_profile import EmployeeProfileORM
from profile_api.security.field_classifier import (
    CLASSIFIED_FIELDS,
    IDENTITY_FIELDS,
    classify,
    fields_of,
    is_classified,
)


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "field,expected",
        [
            ("legal_first_name", FieldClass.SYSTEM_MANAGED),
            ("hire_date", FieldClass.SYSTEM_MANAGED),
            ("fte", FieldClass.SYSTEM_MANAGED),
            ("preferred_name", FieldClass.NON_SENSITIVE),
            ("bio", FieldClass.NON_SENSITIVE),
            ("work_location_type", FieldClass.NON_SENSITIVE),
            ("personal_email", FieldClass.SENSITIVE),
            ("salary", FieldClass.SENSITIVE),
            ("date_of_birth", FieldClass.SENSITIVE),
        ],
    )
    def test_known_fields(self, field: str, expected: FieldClass):
        """Each attribute maps to its class."""
        assert classify(field) == expected

    def test_unknown_field_raises(self):
        """Unclassified names are not silently accepted."""
        with pytest.raises(KeyError):
            classify("nickname")

    def test_identity_fields_are_not_classified(self):
        """Identity attributes sit outside the three classes."""
        for field in IDENTITY_FIELDS:
            assert not is_classified(field)


class TestClassificationTable:
    """Tests for the shape of the classification table."""

    def test_every_field_in_exactly_one_class(self):
        """No attribute is listed under two classes."""
        seen: list[str] = []
        for field_class in FieldClass:
            seen.extend(fields_of(field_class))
        assert len(seen) == len(set(seen))
        assert set(seen) == set(CLASSIFIED_FIELDS)

    def test_every_profile_column_is_classified_or_identity(self):
        """Every persisted profile column has a visibility rule."""
        columns = {column.name for column in EmployeeProfileORM.__table__.columns}
        unclassified = columns - set(CLASSIFIED_FIELDS) - set(IDENTITY_FIELDS)
        assert unclassified == set()

    def test_classified_fields_exist_on_profile(self):
        """The table names only real profile columns."""
        columns = {column.name for column in EmployeeProfileORM.__table__.columns}
        assert set(CLASSIFIED_FIELDS) <= columns
