#!/usr/bin/env python3
"""
Seed script to create the first dashboard admin.

Run this script after migrations (``alembic upgrade head``).

Usage:
    python scripts/seed_data.py [email] [password]

Without arguments a development account is created.
"""

import asyncio
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from finance_survey.core.config import settings
from finance_survey.core.security import hash_password
from finance_survey.db.postgres import AsyncSessionLocal, close_postgres
from finance_survey.domains.admin.models import Admin
from finance_survey.domains.admin.repository import AdminRepository

DEFAULT_EMAIL = "admin@rumahsakit.com"
DEFAULT_PASSWORD = "admin123!"


async def seed_database(email: str, password: str) -> None:
    """Create the admin account unless it already exists."""
    async with AsyncSessionLocal() as db:
        repo = AdminRepository(db)

        if await repo.get_by_email(email):
            print(f"Admin {email} already exists. Skipping seed.")
            return

        admin = await repo.create(
            Admin(
                email=email,
                password_hash=hash_password(password),
                name="Admin Keuangan",
            )
        )

        print("Created Admin:")
        print(f"  ID: {admin.id}")
        print(f"  Email: {admin.email}")
        print(f"  Password: {password}")

        print("\n--- Quick Reference ---\n")
        print(f"  POST {settings.api_prefix}/auth/login")
        print(f'  {{"email": "{email}", "password": "{password}"}}')


async def main():
    """Main entry point."""
    email = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_EMAIL
    password = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_PASSWORD

    if len(password) < settings.admin_password_min_length:
        print(f"Password must be at least {settings.admin_password_min_length} characters")
        sys.exit(1)

    print(f"Environment: {settings.environment}")
    print(f"Database: {settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    print()

    try:
        await seed_database(email.lower(), password)
    finally:
        await close_postgres()


if __name__ == "__main__":
    asyncio.run(main())
