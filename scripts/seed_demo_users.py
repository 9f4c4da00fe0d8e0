#!/usr/bin/env python
"""Provision a small demo organisation: one manager, reports and a peer."""

import asyncio
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from profile_api.database import async_session_maker
from profile_api.models.domain.user import UserRole
from profile_api.models.orm.employee_profile import EmployeeProfileORM
from profile_api.models.orm.user import UserORM
from profile_api.repositories.user_repository import UserRepository
from profile_api.security.password import get_password_service
from profile_api.security.relationships import find_manager_cycle

# employee_id -> (email, first, last, department, job title, role, manager employee_id)
DEMO_ORG: dict[str, tuple[str, str, str, str, str, UserRole, str | None]] = {
    "E-1000": ("maria.manager@example.com", "Maria", "Keller", "Engineering",
               "Engineering Manager", UserRole.MANAGER, None),
    "E-1001": ("eve.engineer@example.com", "Eve", "Novak", "Engineering",
               "Software Engineer", UserRole.EMPLOYEE, "E-1000"),
    "E-1002": ("sam.support@example.com", "Samuel", "Ortiz", "Engineering",
               "Support Engineer", UserRole.EMPLOYEE, "E-1000"),
    "E-2000": ("carl.coworker@example.com", "Carl", "Jensen", "Finance",
               "Financial Analyst", UserRole.EMPLOYEE, None),
}


async def seed_demo_users(password: str) -> bool:
    """Insert the demo organisation.

    Returns:
        True if users were created, False if validation failed or data exists
    """
    manager_of = {employee_id: row[6] for employee_id, row in DEMO_ORG.items()}
    unknown = [m for m in manager_of.values() if m is not None and m not in DEMO_ORG]
    if unknown:
        print(f"Unknown managers referenced: {unknown}")
        return False
    cycle = find_manager_cycle(manager_of)
    if cycle:
        print(f"Manager graph contains a cycle: {' -> '.join(cycle)}")
        return False

    password_service = get_password_service()
    errors = password_service.validate_password_length(password)
    if errors:
        print(f"Password validation failed: {errors}")
        return False
    password_hash = password_service.hash_password(password)

    async with async_session_maker() as session:
        user_repo = UserRepository(session)
        for email, *_ in DEMO_ORG.values():
            if await user_repo.get_by_email(email):
                print(f"User {email} already exists")
                return False

        users: dict[str, UserORM] = {}
        # Managers first so report rows can reference them
        ordered = sorted(DEMO_ORG.items(), key=lambda item: item[1][6] is not None)
        for employee_id, (email, first, last, department, title, role, manager_key) in ordered:
            user = UserORM(
                employee_id=employee_id,
                email=email,
                password_hash=password_hash,
                role=role.value,
                manager_id=users[manager_key].id if manager_key else None,
            )
            session.add(user)
            await session.flush()
            users[employee_id] = user

            session.add(
                EmployeeProfileORM(
                    user_id=user.id,
                    legal_first_name=first,
                    legal_last_name=last,
                    department=department,
                    job_title=title,
                    hire_date=date(2022, 1, 10),
                    fte=Decimal("1.00"),
                    work_location_type="HYBRID",
                )
            )

        await session.commit()

    for employee_id, (email, *_rest) in DEMO_ORG.items():
        print(f"Created {employee_id}: {email}")
    return True


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Provision demo users with profiles")
    parser.add_argument("--password", required=True, help="Password shared by every demo user")
    args = parser.parse_args()

    ok = asyncio.run(seed_demo_users(args.password))
    sys.exit(0 if ok else 1)
