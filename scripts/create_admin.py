#!/usr/bin/env python
"""Create an administrator account."""

import argparse
import asyncio
import sys

from hr_api.database import async_session_maker, engine
from hr_api.exceptions import HRAPIError
from hr_api.models.domain.user import UserRole
from hr_api.models.dto.user import UserCreateRequest
from hr_api.services.user_service import UserService


async def create_admin(email: str, password: str, name: str) -> bool:
    """Create a user holding ROLE_ADMIN."""
    request = UserCreateRequest(email=email, name=name, password=password, roles=[UserRole.ADMIN])

    try:
        async with async_session_maker() as session:
            try:
                user = await UserService(session).create_user(request)
            except HRAPIError as e:
                print(f"Could not create admin: {e.message}")
                return False
            await session.commit()
    finally:
        await engine.dispose()

    print(f"Admin user created: {user.email} ({user.id})")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--email", required=True, help="Email address")
    parser.add_argument("--password", required=True, help="Password (min 8 chars)")
    parser.add_argument("--name", default="Administrator", help="Display name")
    args = parser.parse_args()

    sys.exit(0 if asyncio.run(create_admin(args.email, args.password, args.name)) else 1)
