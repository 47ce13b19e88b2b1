"""Storefront management CLI.

Creates and drops database schemas for the bounded contexts, and bootstraps
the first admin account (public registration only creates regular users).

Usage:
    python src/manage.py setup-db                      # Create all tables
    python src/manage.py drop-db --domain reviews      # Drop one context's tables
    python src/manage.py create-admin --email a@b.io --password ...
"""

import argparse
import sys

DOMAIN_NAMES = ["identity", "catalogue", "ordering", "reviews"]


def _domains(names=None):
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering
    from reviews.domain import reviews

    all_domains = {
        "identity": identity,
        "catalogue": catalogue,
        "ordering": ordering,
        "reviews": reviews,
    }
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def create_admin(email, password, first_name, last_name):
    from identity.user.registration import RegisterUser, VerifyUser
    from shared.auth import Role

    identity = _domains(["identity"])["identity"]
    identity.init()
    with identity.domain_context():
        user_id = identity.process(
            RegisterUser(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                role=Role.ADMIN.value,
            ),
            asynchronous=False,
        )
        identity.process(VerifyUser(user_id=user_id), asynchronous=False)

    print(f"Admin {email} created with id {user_id}.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    admin_parser = subparsers.add_parser("create-admin", help="Register a verified admin user")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--first-name", default="Store")
    admin_parser.add_argument("--last-name", default="Admin")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "create-admin":
        create_admin(args.email, args.password, args.first_name, args.last_name)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
