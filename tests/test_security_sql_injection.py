"""SQL injection prevention tests for the directory filters.

The directory is the only place free text reaches a query. SQLAlchemy binds
every value as a parameter, so filters are trimmed but never rewritten and
LIKE escaping keeps wildcards literal.
"""

from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.models.orm.user import UserORM
from profile_api.services.directory_service import DirectoryService
from profile_api.utils.validation import (
    escape_like_wildcards,
    sanitize_department,
    sanitize_search,
)

from conftest import Org

SQL_INJECTION_PAYLOADS = [
    "'; DROP TABLE users; --",
    "1' OR '1'='1",
    "' UNION SELECT * FROM users --",
    "1' AND (SELECT COUNT(*) FROM employee_profiles) > 0 --",
    "1'; SELECT pg_sleep(5) --",
    "1'; UPDATE employee_profiles SET salary = 0; --",
    "%27%20OR%201%3D1%20--",
    "ʼ OR 1=1 --",
    "1'/**/OR/**/1=1--",
    "$$; DROP TABLE users; $$",
]

XSS_PAYLOADS = [
    "<script>alert('XSS')</script>",
    "<img src=x onerror=alert('XSS')>",
    "<svg onload=alert('XSS')>",
]


class TestFilterSanitisation:
    """Tests for the directory filter sanitisers."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS + XSS_PAYLOADS)
    def test_search_kept_verbatim(self, payload: str) -> None:
        """Search text is bound as a value, so it is never rewritten."""
        assert sanitize_search(f" {payload} ") == payload

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS + XSS_PAYLOADS)
    def test_department_kept_verbatim(self, payload: str) -> None:
        """Department text is bound as a value, so it is never rewritten."""
        assert sanitize_department(payload) == payload

    @pytest.mark.parametrize(
        "department", ["Engineering", "R&D", "Sales+Marketing", "Ops: EMEA", "C# Platform"]
    )
    def test_department_trimmed(self, department: str) -> None:
        """Only surrounding whitespace is removed."""
        assert sanitize_department(f"  {department} ") == department

    def test_empty_and_none(self) -> None:
        """Blank filters mean no filter."""
        assert sanitize_search(None) is None
        assert sanitize_search("   ") is None
        assert sanitize_department(None) is None
        assert sanitize_department("") is None
        assert sanitize_department("   ") is None

    def test_search_truncated(self) -> None:
        """Long search strings are cut to the maximum length."""
        assert len(sanitize_search("A" * 1000)) == 200

    def test_like_wildcard_escaping(self) -> None:
        """LIKE wildcards and the escape character match literally."""
        assert escape_like_wildcards("50%") == r"50\%"
        assert escape_like_wildcards("job_code") == r"job\_code"
        assert escape_like_wildcards("a\\b") == r"a\\b"

        escaped = escape_like_wildcards("test%'; DROP TABLE users; --")
        assert "%" not in escaped.replace(r"\%", "")


class TestDirectoryQueries:
    """Injection payloads run through the real directory query."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS)
    async def test_search_payload_matches_nothing(
        self, session: AsyncSession, org: Org, payload: str
    ) -> None:
        """Payloads are bound as values and leave the schema intact."""
        entries = await DirectoryService(session).list_directory(
            org.employee.principal, search=payload
        )
        assert entries == []

        result = await session.execute(select(UserORM.id))
        assert len(result.all()) == 4

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS + ["Finance' OR '1'='1"])
    async def test_department_payload_matches_nothing(
        self, session: AsyncSession, org: Org, payload: str
    ) -> None:
        """A department no one belongs to narrows the directory to nothing."""
        entries = await DirectoryService(session).list_directory(
            org.outsider.principal, department=payload
        )
        assert entries == []

        result = await session.execute(select(UserORM.id))
        assert len(result.all()) == 4


class TestNoRawSQL:
    """Verify no raw SQL usage in the repositories."""

    def test_no_text_in_repositories(self) -> None:
        """Repositories never build statements from raw SQL strings."""
        repo_dir = Path(__file__).parent.parent / "src" / "profile_api" / "repositories"
        if not repo_dir.exists():
            pytest.skip("Repository directory not found")

        for path in repo_dir.glob("*.py"):
            for lineno, line in enumerate(path.read_text().splitlines(), 1):
                stripped = line.strip()
                if stripped.startswith("#"):
                    continue
                if ".execute(text(" in stripped or "= text(" in stripped:
                    pytest.fail(f"Potential raw SQL in {path.name}:{lineno}: {stripped}")
