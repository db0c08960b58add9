"""
Site Content API — Create Admin Command
========================================

What:  Provisions an admin account from the command line. This is the only
       way to create one; POST /api/users is closed.
How:   Prompts for anything not given as an option (the password always
       through getpass, entered twice), hashes it, and inserts the row in
       one transaction.

Usage:
    content-api-create-admin --username admin --email admin@example.com
    python -m content_api.create_admin
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import List, Optional

from content_api.config import settings
from content_api.database import async_session_factory, create_tables, dispose_engine
from content_api.exceptions import ContentAPIError
from content_api.services.user_service import user_service

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an admin panel account.")
    parser.add_argument("--username", help="login name")
    parser.add_argument("--email", help="contact email, must be unique")
    return parser.parse_args(argv)


def prompt_password() -> str:
    password = getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password != getpass.getpass("Confirm password: "):
        raise ValueError("Passwords do not match")
    return password


async def create_admin(username: str, email: str, password: str) -> int:
    if settings.auto_create_tables:
        await create_tables()

    try:
        async with async_session_factory() as session:
            try:
                user = await user_service.create_admin(session, username, password, email)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            return user.id
    finally:
        await dispose_engine()


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    username = (args.username or input("Username: ")).strip()
    email = (args.email or input("Email: ")).strip()
    try:
        password = prompt_password()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        user_id = asyncio.run(create_admin(username, email, password))
    except ContentAPIError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Created admin '{username}' (id={user_id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
