#!/usr/bin/env python3
"""
Script to provision a rescue user and print an access token for it.

This script:
1. Creates a new user with the requested role (or reuses an existing one)
2. Issues a signed access token whose subject is the user id

Usage:
  python scripts/create_user.py --email staff@example.org --role Staff

Identity-provider login is out of scope, so this is how the first Admin
and Staff accounts are seeded.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rescue.config.settings import get_settings
from rescue.domain.models.user import User
from rescue.domain.value_objects.role import Role
from rescue.infrastructure.auth.jwt_service import JWTService
from rescue.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_user_with_token(
    email: str, role: Role, first_name: str, last_name: str
) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            user = await uow.users.get_by_email(email)
            if user:
                print(f"User {user.email} already exists (ID: {user.id}, role: {user.role.value})")
                if user.role != role:
                    print(f"   Requested role {role.value} ignored; existing role kept")
            else:
                print(f"Creating new user: {email}")
                user = await uow.users.add(
                    User.create(email=email, first_name=first_name, last_name=last_name, role=role)
                )
                await uow.commit()

        token = jwt_service.create_access_token(subject=user.id)
        print("\nUser ready")
        print(f"   User ID: {user.id}")
        print(f"   Email: {user.email}")
        print(f"   Role: {user.role.value}")
        print(f"\nAccess token (expires in {settings.jwt_access_token_expires_minutes} min):")
        print(f"   {token}")
    except Exception as exc:
        print(f"\nError creating user: {exc}")
        import traceback

        traceback.print_exc()
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Create a rescue user and print an access token",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed the first administrator
  python scripts/create_user.py --email admin@example.org --role Admin

  # Issue a fresh token for an existing user
  python scripts/create_user.py --email staff@example.org
        """,
    )
    parser.add_argument("--email", required=True, help="Email of the user")
    parser.add_argument(
        "--role",
        default=Role.STAFF.value,
        choices=[role.value for role in Role],
        help="Role for a newly created user (default: Staff)",
    )
    parser.add_argument("--first-name", default="Rescue", help="First name for a new user")
    parser.add_argument("--last-name", default="Admin", help="Last name for a new user")

    args = parser.parse_args()

    print("=" * 60)
    print("Rescue Core - user provisioning")
    print("=" * 60)

    asyncio.run(
        create_user_with_token(args.email, Role(args.role), args.first_name, args.last_name)
    )

    print("\n" + "=" * 60)
    print("Process completed")
    print("=" * 60)
