"""
Seed script for the demo accounts used by the frontend.

This script:
1. Creates the HR account hr@company.com
2. Creates the employee account john@company.com
3. Skips any account whose email is already registered

Usage:
    python -m staffsphere.scripts.seed_users [--dry-run] [--password PASSWORD]

Options:
    --dry-run    Preview which accounts would be created without writing them
"""

import argparse

from flask import current_app

from staffsphere import create_app
from staffsphere.enums.role import Role
from staffsphere.extensions import db
from staffsphere.models.user import User

DEFAULT_PASSWORD = "123456"

SEED_USERS = [
    {"name": "HR Manager", "email": "hr@company.com", "role": Role.HR},
    {"name": "John Doe", "email": "john@company.com", "role": Role.EMPLOYEE},
]


def seed_users(password: str = DEFAULT_PASSWORD, dry_run: bool = False) -> list[str]:
    """Create the demo accounts that do not exist yet. Returns the emails created."""
    mode = "DRY RUN" if dry_run else "LIVE"
    created = []

    for seed in SEED_USERS:
        if User.get_by_email(seed["email"]):
            current_app.logger.info(f"[{mode}] {seed['email']} already exists, skipping")
            continue

        current_app.logger.info(f"[{mode}] Creating {seed['role'].value} user {seed['email']}")
        if not dry_run:
            db.session.add(User.create(seed["name"], seed["email"], password, seed["role"].value))
        created.append(seed["email"])

    if not dry_run:
        db.session.commit()

    current_app.logger.info(f"[{mode}] Seeding complete: {len(created)} users created")
    return created


if __name__ == "__main__":
    app = create_app()
    app.app_context().push()

    parser = argparse.ArgumentParser(description="Seed the demo HR and employee accounts")
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Preview which accounts would be created without writing them",
    )
    parser.add_argument("-p", "--password", default=DEFAULT_PASSWORD, help="Password for the seeded accounts")
    args = parser.parse_args()

    seed_users(password=args.password, dry_run=args.dry_run)
