"""Utility script to create an administrator account in the database."""

from __future__ import annotations

import argparse
from functools import partial
from getpass import getpass

import anyio

from boardingfinder.application.use_cases.users import create_admin_user
from boardingfinder.domain.errors import BoardingFinderError
from boardingfinder.infrastructure.data_service import DataService
from boardingfinder.infrastructure.database import SessionLocal, initialize_database
from boardingfinder.infrastructure.realtime import change_feed


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for administrator creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator for the BoardingFinder API.",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the administrator (default: admin@example.com)",
    )
    parser.add_argument(
        "--full-name",
        default="Administrator",
        help="Display name of the administrator (default: Administrator)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the account. Prompted for when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()
    data = DataService(SessionLocal, change_feed)
    try:
        profile, _ = anyio.run(
            partial(
                create_admin_user,
                data,
                email=args.email,
                password=password,
                full_name=args.full_name,
            )
        )
    except BoardingFinderError as exc:
        raise SystemExit(f"Could not create the administrator: {exc}") from exc
    print(
        "Administrator created:\n"
        f"  ID: {profile.id}\n"
        f"  Name: {profile.full_name or '-'}\n"
        f"  Email: {profile.email}"
    )


if __name__ == "__main__":
    main()
