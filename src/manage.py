"""Grocery back-office management CLI.

Usage:
    python src/manage.py setup-db                     # Create all tables
    python src/manage.py drop-db                      # Drop all tables
    python src/manage.py seed                         # Load demo data
    python src/manage.py issue-token USER_ID EMAIL --role admin
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the grocery domain."""
    from grocery.domain import grocery
    from grocery.utils.db import setup_db

    print("Initializing grocery domain...")
    grocery.init()
    print("Creating database schema...")
    setup_db(grocery)
    print("Done.")


def drop_database():
    """Drop the database schema for the grocery domain."""
    from grocery.domain import grocery
    from grocery.utils.db import drop_db

    print("Initializing grocery domain...")
    grocery.init()
    print("Dropping database schema...")
    drop_db(grocery)
    print("Done.")


def seed_database():
    """Load demo categories, products and a customer."""
    from grocery.domain import grocery
    from grocery.seed import seed

    print("Initializing grocery domain...")
    grocery.init()
    created = seed(grocery)
    print(
        f"Seeded {created['categories']} categories, {created['products']} products "
        f"and {created['customers']} customers."
    )


def issue_token(user_id, email, role):
    """Print a bearer token for manual API use."""
    from grocery.auth.principal import Principal, Role
    from grocery.auth.tokens import issue_token as _issue

    print(_issue(Principal(user_id=user_id, email=email, role=Role(role))))


def main():
    parser = argparse.ArgumentParser(description="Grocery back-office management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load demo categories, products and a customer")

    token_parser = subparsers.add_parser("issue-token", help="Issue a signed bearer token")
    token_parser.add_argument("user_id")
    token_parser.add_argument("email")
    token_parser.add_argument("--role", choices=["admin", "customer"], default="customer")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    elif args.command == "issue-token":
        issue_token(args.user_id, args.email, args.role)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
